from django.contrib import admin
from django.urls import path, include
from . import views

urlpatterns = [
    path('admin/', admin.site.urls),

    path('', views.home, name='home'),

    path('turfs/', include('turfs.urls')),
    path('booking/', include('booking.urls')),
    path('users/', include('users.urls')),

    # Admin panel for turf owners
    path('manager/', include('manager.urls')),

    # Notification endpoints, reachable cross-origin
    path('functions/', include('notifications.urls')),
]
