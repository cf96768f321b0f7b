from django.urls import path
from . import views

urlpatterns = [
    path('booking-notification/', views.booking_notification, name='booking_notification'),
    path('send-booking-email/', views.send_booking_email, name='send_booking_email'),
]
