from django.urls import path
from .views import ConfirmBookingView, UserBookingsView

urlpatterns = [
    path('bookings', ConfirmBookingView.as_view(), name='confirm-booking'),
    path('user/bookings', UserBookingsView.as_view(), name='user-bookings'),
]
