import logging
import os
import time

import cloudinary.exceptions
import cloudinary.uploader
from django.conf import settings
from django.utils.text import slugify
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)


class VehicleImageService:

    @staticmethod
    def upload(file):
        """Push one image to Cloudinary and return its HTTPS URL."""
        stem, _ = os.path.splitext(os.path.basename(file.name))
        result = cloudinary.uploader.upload(
            file,
            folder=settings.AUTOHUB_CLOUDINARY_FOLDER,
            public_id=f"{int(time.time() * 1000)}-{slugify(stem) or 'image'}",
            resource_type="auto",
        )
        return result["secure_url"]

    @staticmethod
    def upload_all(files):
        urls = []
        for file in files:
            try:
                urls.append(VehicleImageService.upload(file))
            except cloudinary.exceptions.Error as e:
                logger.error(f"Failed to upload vehicle image {file.name}: {e}")
                raise ValidationError({"images": ["Failed to upload image to Cloudinary."]})
        return urls
