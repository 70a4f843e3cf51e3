from django.contrib import admin
from django.utils.html import format_html
from .models import Vehicle, VehicleImage


class VehicleImageInline(admin.TabularInline):
    model = VehicleImage
    extra = 0
    fields = ('position', 'url', 'uploaded_at', 'image_preview')
    readonly_fields = ('uploaded_at', 'image_preview')

    def image_preview(self, obj):
        if obj.url:
            return format_html('<img src="{}" width="100" height="100" />', obj.url)
        return "No image"

    image_preview.short_description = "Image Preview"


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ('brand', 'model', 'year', 'price', 'vehicle_type', 'condition', 'mileage', 'status', 'seller', 'created_at')
    search_fields = ('brand', 'model', 'seller__email', 'contact_name')
    list_filter = ('status', 'vehicle_type', 'condition', 'year')
    readonly_fields = ('created_at', 'status')
    inlines = [VehicleImageInline]
