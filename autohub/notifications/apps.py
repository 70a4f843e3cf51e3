from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "autohub.notifications"
    label = "notifications"

    def ready(self):
        import autohub.notifications.signals  # noqa: F401
