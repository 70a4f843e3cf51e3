from django.contrib import admin
from .models import Bid


@admin.register(Bid)
class BidAdmin(admin.ModelAdmin):
    list_display = ('id', 'vehicle', 'user', 'amount', 'status', 'created_at')
    search_fields = ('vehicle__brand', 'vehicle__model', 'user__email')
    list_filter = ('status',)
    readonly_fields = ('vehicle', 'user', 'amount', 'status', 'created_at')
