"""
Manager App URLs
"""

from django.urls import path
from . import views

app_name = 'manager'

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('turfs/add/', views.add_turf, name='add_turf'),
    path('turfs/<int:turf_id>/edit/', views.edit_turf, name='edit_turf'),
    path('turfs/<int:turf_id>/delete/', views.delete_turf, name='delete_turf'),

    path('api/metrics/', views.api_metrics, name='api_metrics'),
]
