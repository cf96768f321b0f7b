from django.contrib import admin
from .models import Turf


@admin.register(Turf)
class TurfAdmin(admin.ModelAdmin):
    list_display = ['name', 'location', 'price', 'capacity', 'rating', 'reviews']
    search_fields = ['name', 'location']
