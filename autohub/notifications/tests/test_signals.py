from decimal import Decimal
from unittest import mock

import pytest

from autohub.bids.services.bid_service import BidService
from autohub.bookings.services.booking_service import BookingService
from autohub.common.exceptions import InvalidArgument
from autohub.notifications import utils


pytestmark = pytest.mark.django_db


@pytest.fixture
def broadcast():
    with mock.patch("autohub.notifications.utils.broadcast") as patched:
        yield patched


def test_new_vehicle_is_announced_after_commit(broadcast, make_vehicle, seller, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        vehicle = make_vehicle(seller, images=2)

    broadcast.assert_called_once()
    event, data = broadcast.call_args.args
    assert event == utils.NEW_VEHICLE
    assert data["id"] == vehicle.id
    assert data["sellerId"] == seller.id
    assert len(data["images"]) == 2
    assert data["price"] == "10000.00"


def test_new_bid_is_announced(broadcast, vehicle, buyer, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("10500"))

    broadcast.assert_called_once_with(utils.NEW_BID, {"vehicleId": vehicle.id, "amount": "10500.00"})


def test_rejected_bid_is_not_announced(broadcast, vehicle, buyer, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(InvalidArgument):
            BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("1"))

    assert callbacks == []
    broadcast.assert_not_called()


def test_booking_is_announced_once(broadcast, vehicle, seller, buyer, django_capture_on_commit_callbacks):
    BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("10500"))

    with django_capture_on_commit_callbacks(execute=True):
        booking = BookingService.confirm_booking(user=seller, vehicle_id=vehicle.id)

    broadcast.assert_called_once_with(
        utils.BOOKING_CONFIRMED,
        {"vehicleId": vehicle.id, "bookingId": booking.id},
    )


def test_broadcast_failure_is_swallowed():
    layer = mock.Mock()
    layer.group_send = mock.AsyncMock(side_effect=RuntimeError("redis down"))

    with mock.patch("autohub.notifications.utils.get_channel_layer", return_value=layer):
        assert utils.broadcast(utils.NEW_BID, {"vehicleId": 1, "amount": "2.00"}) is False


def test_broadcast_without_channel_layer():
    with mock.patch("autohub.notifications.utils.get_channel_layer", return_value=None):
        assert utils.broadcast(utils.NEW_BID, {}) is False


def test_new_bid_amount_matches_rest_format(broadcast, vehicle, buyer, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("10001"))

    _, data = broadcast.call_args.args
    assert data["amount"] == "10001.00"
