from django.contrib import admin
from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ('id', 'vehicle', 'buyer', 'seller', 'final_price', 'status', 'created_at')
    search_fields = ('vehicle__brand', 'vehicle__model', 'buyer__email', 'seller__email')
    readonly_fields = ('vehicle', 'buyer', 'seller', 'bid', 'final_price', 'status', 'created_at')
