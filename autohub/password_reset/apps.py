from django.apps import AppConfig


class PasswordResetConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "autohub.password_reset"
    label = "password_reset"
