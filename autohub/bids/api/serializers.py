from rest_framework import serializers
from ..models import Bid
from autohub.users.api.serializers import UserMiniSerializer
from autohub.inventory.api.serializers import VehicleSummarySerializer


class BidSerializer(serializers.ModelSerializer):
    vehicleId = serializers.IntegerField(source='vehicle_id', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)
    user = UserMiniSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Bid
        fields = ['id', 'vehicleId', 'userId', 'user', 'amount', 'status', 'createdAt']
        read_only_fields = fields


class UserBidSerializer(BidSerializer):
    vehicle = VehicleSummarySerializer(read_only=True)

    class Meta(BidSerializer.Meta):
        fields = ['id', 'vehicleId', 'vehicle', 'amount', 'status', 'createdAt']
        read_only_fields = fields


class BidCreateSerializer(serializers.Serializer):
    # no min_value here: the price comparison in BidService reports low amounts
    vehicleId = serializers.IntegerField(source='vehicle_id')
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
