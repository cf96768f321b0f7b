from django.shortcuts import render

from turfs.models import Turf


def home(request):
    featured = Turf.objects.order_by('-rating', '-created_at')[:3]
    return render(request, 'home.html', {'featured_turfs': featured})
