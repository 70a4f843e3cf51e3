import logging
from django.db import transaction
from django.db.models import Q
from rest_framework.exceptions import NotFound, PermissionDenied

from autohub.common.exceptions import InvalidState
from autohub.inventory.models import Vehicle
from autohub.bids.models import Bid
from ..models import Booking

logger = logging.getLogger(__name__)


class BookingService:

    @staticmethod
    def confirm_booking(*, user, vehicle_id) -> Booking:
        """
        Close bidding on a vehicle by booking it to the highest pending bid.

        Runs as one transaction with the vehicle row locked: the booking is
        created, the vehicle is marked sold, the winning bid is accepted and
        every other pending bid is rejected, or nothing changes at all.
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
                raise InvalidState("Vehicle already booked")

            if vehicle.seller_id != user.id:
                raise PermissionDenied("Only seller can confirm booking")

            winning_bid = (
                Bid.objects
                .select_for_update()
                .filter(vehicle=vehicle, status=Bid.STATUS_PENDING)
                .order_by("-amount", "created_at", "id")
                .first()
            )
            if winning_bid is None:
                raise InvalidState("No bids available")

            booking = Booking.objects.create(
                vehicle=vehicle,
                buyer_id=winning_bid.user_id,
                seller_id=vehicle.seller_id,
                bid=winning_bid,
                final_price=winning_bid.amount,
            )

            vehicle.status = Vehicle.STATUS_SOLD
            vehicle.save(update_fields=["status"])

            winning_bid.status = Bid.STATUS_ACCEPTED
            winning_bid.save(update_fields=["status"])

            rejected = (
                Bid.objects
                .filter(vehicle=vehicle, status=Bid.STATUS_PENDING)
                .exclude(id=winning_bid.id)
                .update(status=Bid.STATUS_REJECTED)
            )

        logger.info(
            f"Booking {booking.id} confirmed for vehicle {vehicle.id}: "
            f"bid {winning_bid.id} accepted at {winning_bid.amount}, {rejected} bid(s) rejected"
        )
        return booking

    @staticmethod
    def get_user_bookings(user):
        return (
            Booking.objects
            .select_related("vehicle", "buyer", "seller")
            .prefetch_related("vehicle__images")
            .filter(Q(buyer=user) | Q(seller=user))
            .order_by("-created_at", "-id")
        )
