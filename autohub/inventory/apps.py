from django.apps import AppConfig
from django.conf import settings


class InventoryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "autohub.inventory"
    label = "inventory"

    def ready(self):
        import cloudinary

        cloudinary.config(
            cloud_name=settings.CLOUDINARY_STORAGE["CLOUD_NAME"],
            api_key=settings.CLOUDINARY_STORAGE["API_KEY"],
            api_secret=settings.CLOUDINARY_STORAGE["API_SECRET"],
            secure=True,
        )
