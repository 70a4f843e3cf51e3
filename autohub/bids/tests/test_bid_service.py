from decimal import Decimal

import pytest
from rest_framework.exceptions import NotFound, PermissionDenied

from autohub.bids.models import Bid
from autohub.bids.services.bid_service import BidService
from autohub.common.exceptions import InvalidArgument, InvalidState
from autohub.inventory.models import Vehicle


pytestmark = pytest.mark.django_db


def test_bid_equal_to_price_is_rejected(vehicle, buyer):
    with pytest.raises(InvalidArgument) as exc:
        BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("10000"))

    assert str(exc.value.detail) == "Bid must be higher than current price"
    assert not Bid.objects.exists()


def test_bid_above_price_is_pending(vehicle, buyer):
    bid = BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("10001"))

    assert bid.status == Bid.STATUS_PENDING
    assert bid.amount == Decimal("10001")
    assert bid.user == buyer
    assert bid.vehicle == vehicle


def test_bid_must_beat_highest_pending_bid(vehicle, buyer, other_buyer):
    BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("15000"))

    with pytest.raises(InvalidArgument) as exc:
        BidService.place_bid(user=other_buyer, vehicle_id=vehicle.id, amount=Decimal("12000"))

    assert str(exc.value.detail) == "Bid must be higher than current highest bid"
    assert Bid.objects.count() == 1


def test_repeating_identical_bid_is_rejected(vehicle, buyer):
    BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("11000"))

    with pytest.raises(InvalidArgument):
        BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("11000"))

    assert Bid.objects.count() == 1


def test_seller_cannot_bid_on_own_vehicle(vehicle, seller):
    with pytest.raises(PermissionDenied):
        BidService.place_bid(user=seller, vehicle_id=vehicle.id, amount=Decimal("50000"))

    assert not Bid.objects.exists()


def test_bid_on_sold_vehicle_is_rejected(make_vehicle, seller, buyer):
    sold = make_vehicle(seller, status=Vehicle.STATUS_SOLD)

    with pytest.raises(InvalidState) as exc:
        BidService.place_bid(user=buyer, vehicle_id=sold.id, amount=Decimal("20000"))

    assert str(exc.value.detail) == "Vehicle is no longer available"


def test_bid_on_missing_vehicle(buyer):
    with pytest.raises(NotFound):
        BidService.place_bid(user=buyer, vehicle_id=999999, amount=Decimal("20000"))


def test_list_bids_returns_pending_highest_first(vehicle, buyer, other_buyer):
    low = BidService.place_bid(user=buyer, vehicle_id=vehicle.id, amount=Decimal("11000"))
    high = BidService.place_bid(user=other_buyer, vehicle_id=vehicle.id, amount=Decimal("13000"))
    Bid.objects.create(vehicle=vehicle, user=buyer, amount=Decimal("9000"), status=Bid.STATUS_REJECTED)

    assert list(BidService.list_bids(vehicle.id)) == [high, low]


def test_list_bids_for_unknown_vehicle_is_empty(db):
    assert list(BidService.list_bids(424242)) == []


def test_user_bids_include_every_status_newest_first(make_vehicle, seller, buyer):
    first = make_vehicle(seller, price="5000")
    second = make_vehicle(seller, price="6000")
    older = BidService.place_bid(user=buyer, vehicle_id=first.id, amount=Decimal("5500"))
    newer = BidService.place_bid(user=buyer, vehicle_id=second.id, amount=Decimal("6500"))
    Bid.objects.filter(id=older.id).update(status=Bid.STATUS_REJECTED)

    assert list(BidService.get_user_bids(buyer)) == [newer, older]
