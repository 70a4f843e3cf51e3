from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from autohub.inventory.models import Vehicle, VehicleImage
from autohub.users.models import User


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make_user(email, password="s3cret-pass", name="Test User", phone="+251911000000"):
        return User.objects.create_user(email=email, password=password, name=name, phone=phone)
    return _make_user


@pytest.fixture
def seller(make_user):
    return make_user("seller@example.com", name="Sam Seller")


@pytest.fixture
def buyer(make_user):
    return make_user("buyer@example.com", name="Bea Buyer")


@pytest.fixture
def other_buyer(make_user):
    return make_user("other@example.com", name="Oli Other")


@pytest.fixture
def make_vehicle(db):
    def _make_vehicle(seller, price="10000.00", brand="Toyota", model="Corolla", year=2018,
                      vehicle_type="sedan", status=Vehicle.STATUS_AVAILABLE, images=1):
        vehicle = Vehicle.objects.create(
            seller=seller,
            brand=brand,
            model=model,
            year=year,
            price=Decimal(price),
            vehicle_type=vehicle_type,
            condition="used",
            mileage=42000,
            contact_name=seller.name,
            contact_phone=seller.phone,
            status=status,
        )
        for position in range(images):
            VehicleImage.objects.create(
                vehicle=vehicle,
                url=f"https://res.cloudinary.com/test/image/upload/{vehicle.id}-{position}.jpg",
                position=position,
            )
        return vehicle
    return _make_vehicle


@pytest.fixture
def vehicle(make_vehicle, seller):
    return make_vehicle(seller)
