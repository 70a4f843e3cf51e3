from decimal import Decimal

import pytest

from autohub.bids.models import Bid


pytestmark = pytest.mark.django_db


@pytest.fixture
def pending_bid(vehicle, buyer):
    return Bid.objects.create(vehicle=vehicle, user=buyer, amount=Decimal("12500"))


def test_confirm_booking_requires_authentication(api_client, vehicle):
    assert api_client.post("/api/bookings", {"vehicleId": vehicle.id}, format="json").status_code == 401


def test_confirm_booking(api_client, vehicle, seller, buyer, pending_bid):
    api_client.force_authenticate(user=seller)

    response = api_client.post("/api/bookings", {"vehicleId": vehicle.id}, format="json")

    assert response.status_code == 201
    assert response.data["message"] == "Booking confirmed"
    booking = response.data["booking"]
    assert booking["vehicleId"] == vehicle.id
    assert booking["buyerId"] == buyer.id
    assert booking["sellerId"] == seller.id
    assert booking["bidId"] == pending_bid.id
    assert booking["finalPrice"] == "12500.00"
    assert booking["status"] == "confirmed"

    listing = api_client.get(f"/api/vehicles/{vehicle.id}")
    assert listing.data["status"] == "sold"


def test_confirm_booking_by_non_seller(api_client, vehicle, buyer, pending_bid):
    api_client.force_authenticate(user=buyer)

    response = api_client.post("/api/bookings", {"vehicleId": vehicle.id}, format="json")

    assert response.status_code == 403
    assert response.data["detail"] == "Only seller can confirm booking"


def test_confirm_booking_without_bids(api_client, vehicle, seller):
    api_client.force_authenticate(user=seller)

    response = api_client.post("/api/bookings", {"vehicleId": vehicle.id}, format="json")

    assert response.status_code == 400
    assert response.data["detail"] == "No bids available"


def test_confirm_booking_missing_vehicle(api_client, seller):
    api_client.force_authenticate(user=seller)

    assert api_client.post("/api/bookings", {"vehicleId": 999999}, format="json").status_code == 404


def test_my_bookings(api_client, vehicle, seller, buyer, other_buyer, pending_bid):
    api_client.force_authenticate(user=seller)
    api_client.post("/api/bookings", {"vehicleId": vehicle.id}, format="json")

    seller_view = api_client.get("/api/user/bookings")
    api_client.force_authenticate(user=buyer)
    buyer_view = api_client.get("/api/user/bookings")
    api_client.force_authenticate(user=other_buyer)
    bystander_view = api_client.get("/api/user/bookings")

    assert len(seller_view.data) == 1
    assert seller_view.data[0]["vehicle"]["status"] == "sold"
    assert buyer_view.data[0]["buyer"]["id"] == buyer.id
    assert bystander_view.data == []
