import logging
from decimal import Decimal
from django.db import transaction
from django.db.models import Max
from rest_framework.exceptions import NotFound, PermissionDenied

from autohub.common.exceptions import InvalidArgument, InvalidState
from autohub.inventory.models import Vehicle
from ..models import Bid

logger = logging.getLogger(__name__)


class BidService:

    @staticmethod
    def place_bid(*, user, vehicle_id, amount: Decimal) -> Bid:
        """
        Place a bid on an available vehicle.

        The vehicle row is locked for the whole check-then-insert so two
        concurrent bids on the same vehicle are compared one after another.
        """
        with transaction.atomic():
            vehicle = (
                Vehicle.objects
                .select_for_update()
                .filter(id=vehicle_id)
                .first()
            )
            if vehicle is None:
                raise NotFound("Vehicle not found")

            if not vehicle.is_available:
                raise InvalidState("Vehicle is no longer available")

            if vehicle.seller_id == user.id:
                raise PermissionDenied("You cannot bid on your own vehicle")

            if amount <= vehicle.price:
                raise InvalidArgument("Bid must be higher than current price")

            highest_bid = (
                Bid.objects
                .filter(vehicle=vehicle, status=Bid.STATUS_PENDING)
                .aggregate(max_amount=Max("amount"))
                ["max_amount"]
            )
            if highest_bid is not None and amount <= highest_bid:
                raise InvalidArgument("Bid must be higher than current highest bid")

            bid = Bid.objects.create(vehicle=vehicle, user=user, amount=amount)

        logger.info(f"Bid {bid.id} of {amount} placed on vehicle {vehicle.id} by user_id={user.id}")
        return bid

    @staticmethod
    def list_bids(vehicle_id):
        # unknown vehicles simply have no bids
        return (
            Bid.objects
            .select_related("user")
            .filter(vehicle__id=vehicle_id, status=Bid.STATUS_PENDING)
            .order_by("-amount", "created_at", "id")
        )

    @staticmethod
    def get_user_bids(user):
        return (
            Bid.objects
            .select_related("user", "vehicle")
            .prefetch_related("vehicle__images")
            .filter(user=user)
            .order_by("-created_at", "-id")
        )
