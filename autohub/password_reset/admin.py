from django.contrib import admin
from .models import ResetToken


@admin.register(ResetToken)
class ResetTokenAdmin(admin.ModelAdmin):
    list_display = ("id", "user_email", "created_at", "expires_at")
    search_fields = ("user__email",)
    readonly_fields = ("user", "token_hash", "created_at")

    def user_email(self, obj):
        return obj.user.email

    user_email.short_description = "User Email"

    def has_add_permission(self, request):
        return False
