from rest_framework import serializers
from ..models import Booking
from autohub.users.api.serializers import UserMiniSerializer
from autohub.inventory.api.serializers import VehicleSummarySerializer


class BookingSerializer(serializers.ModelSerializer):
    vehicleId = serializers.IntegerField(source='vehicle_id', read_only=True)
    buyerId = serializers.IntegerField(source='buyer_id', read_only=True)
    sellerId = serializers.IntegerField(source='seller_id', read_only=True)
    bidId = serializers.IntegerField(source='bid_id', read_only=True)
    finalPrice = serializers.DecimalField(source='final_price', max_digits=12, decimal_places=2, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Booking
        fields = ['id', 'vehicleId', 'buyerId', 'sellerId', 'bidId', 'finalPrice', 'status', 'createdAt']
        read_only_fields = fields


class UserBookingSerializer(BookingSerializer):
    vehicle = VehicleSummarySerializer(read_only=True)
    buyer = UserMiniSerializer(read_only=True)
    seller = UserMiniSerializer(read_only=True)

    class Meta(BookingSerializer.Meta):
        fields = BookingSerializer.Meta.fields + ['vehicle', 'buyer', 'seller']
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    vehicleId = serializers.IntegerField(source='vehicle_id')
