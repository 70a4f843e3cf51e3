import json
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver
from rest_framework.utils.encoders import JSONEncoder

from autohub.inventory.models import Vehicle
from autohub.bids.models import Bid
from autohub.bookings.models import Booking
from . import utils


def _plain(data):
    # serializer output may hold ReturnDicts and lazy values the channel layer cannot pack
    return json.loads(json.dumps(data, cls=JSONEncoder))


def _announce_vehicle(vehicle_id):
    from autohub.inventory.api.serializers import VehicleSerializer
    from autohub.inventory.services.vehicle_service import VehicleService

    # re-read after commit so the images written alongside the vehicle are included
    vehicle = VehicleService.base_queryset().filter(id=vehicle_id).first()
    if vehicle is None:
        return
    utils.broadcast(utils.NEW_VEHICLE, _plain(VehicleSerializer(vehicle).data))


@receiver(post_save, sender=Vehicle)
def notify_new_vehicle(sender, instance, created, **kwargs):
    if not created:
        return
    vehicle_id = instance.id
    transaction.on_commit(lambda: _announce_vehicle(vehicle_id))


@receiver(post_save, sender=Bid)
def notify_new_bid(sender, instance, created, **kwargs):
    if not created:
        return
    payload = {"vehicleId": instance.vehicle_id, "amount": f"{instance.amount:.2f}"}
    transaction.on_commit(lambda: utils.broadcast(utils.NEW_BID, payload))


@receiver(post_save, sender=Booking)
def notify_booking_confirmed(sender, instance, created, **kwargs):
    if not created:
        return
    payload = {"vehicleId": instance.vehicle_id, "bookingId": instance.id}
    transaction.on_commit(lambda: utils.broadcast(utils.BOOKING_CONFIRMED, payload))
