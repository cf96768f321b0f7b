from django.urls import path
from . import views

urlpatterns = [
    path('', views.turf_list, name='turf_list'),
    path('<int:turf_id>/', views.turf_detail, name='turf_detail'),
    path('<int:turf_id>/slots/', views.api_available_slots, name='turf_slots'),
]
