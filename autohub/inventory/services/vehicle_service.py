import logging
from django.db import transaction
from rest_framework.exceptions import NotFound

from ..models import Vehicle, VehicleImage
from .image_service import VehicleImageService

logger = logging.getLogger(__name__)


class VehicleService:

    @staticmethod
    def base_queryset():
        return Vehicle.objects.select_related("seller").prefetch_related("images")

    @staticmethod
    def get_vehicle(vehicle_id):
        vehicle = VehicleService.base_queryset().filter(id=vehicle_id).first()
        if vehicle is None:
            raise NotFound("Vehicle not found")
        return vehicle

    @staticmethod
    def get_user_vehicles(user):
        return VehicleService.base_queryset().filter(seller=user).order_by("-created_at", "-id")

    @staticmethod
    def create_vehicle(*, seller, validated_data):
        files = validated_data.pop("images")
        # uploads happen before the insert so a failed upload leaves no row behind
        urls = VehicleImageService.upload_all(files)

        with transaction.atomic():
            vehicle = Vehicle.objects.create(seller=seller, **validated_data)
            VehicleImage.objects.bulk_create([
                VehicleImage(vehicle=vehicle, url=url, position=position)
                for position, url in enumerate(urls)
            ])

        logger.info(f"Vehicle {vehicle.id} posted by user_id={seller.id} with {len(urls)} image(s)")
        return VehicleService.get_vehicle(vehicle.id)
