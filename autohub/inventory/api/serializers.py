from datetime import date
from django.conf import settings
from rest_framework import serializers
from drf_spectacular.utils import extend_schema_field
from ..models import Vehicle
from autohub.users.api.serializers import UserMiniSerializer, UserContactSerializer
import bleach


def clean_text(value, field_label, max_length=None):
    cleaned = bleach.clean(value.strip(), tags=[], strip=True)
    if not cleaned:
        raise serializers.ValidationError(f"{field_label} cannot be empty.")
    if max_length and len(cleaned) > max_length:
        raise serializers.ValidationError(f"{field_label} cannot exceed {max_length} characters.")
    return cleaned


class VehicleSerializer(serializers.ModelSerializer):
    """Public representation of a listing, with a short seller summary."""
    sellerId = serializers.IntegerField(source='seller_id', read_only=True)
    seller = UserMiniSerializer(read_only=True)
    type = serializers.CharField(source='vehicle_type', read_only=True)
    images = serializers.SerializerMethodField()
    contactName = serializers.CharField(source='contact_name', read_only=True)
    contactPhone = serializers.CharField(source='contact_phone', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Vehicle
        fields = [
            'id', 'sellerId', 'seller', 'brand', 'model', 'year', 'price', 'type',
            'condition', 'mileage', 'description', 'images', 'contactName',
            'contactPhone', 'status', 'createdAt',
        ]
        read_only_fields = fields

    @extend_schema_field(serializers.ListField(child=serializers.URLField()))
    def get_images(self, obj):
        return obj.image_urls


class VehicleDetailSerializer(VehicleSerializer):
    seller = UserContactSerializer(read_only=True)


class VehicleSummarySerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='vehicle_type', read_only=True)
    images = serializers.SerializerMethodField()

    class Meta:
        model = Vehicle
        fields = ['id', 'brand', 'model', 'year', 'price', 'type', 'status', 'images']
        read_only_fields = fields

    @extend_schema_field(serializers.ListField(child=serializers.URLField()))
    def get_images(self, obj):
        return obj.image_urls


class VehicleCreateSerializer(serializers.Serializer):
    brand = serializers.CharField(max_length=100)
    model = serializers.CharField(max_length=100)
    year = serializers.IntegerField(min_value=1886)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    type = serializers.CharField(source='vehicle_type', max_length=50)
    condition = serializers.CharField(max_length=50)
    mileage = serializers.IntegerField(min_value=0)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    contactName = serializers.CharField(source='contact_name', max_length=150)
    contactPhone = serializers.CharField(source='contact_phone', max_length=32)
    images = serializers.ListField(
        child=serializers.FileField(),
        allow_empty=False,
        error_messages={"empty": "At least one image is required", "required": "At least one image is required"},
    )

    def validate_brand(self, value):
        return clean_text(value, "Brand", 100)

    def validate_model(self, value):
        return clean_text(value, "Model", 100)

    def validate_year(self, value):
        if value > date.today().year + 1:
            raise serializers.ValidationError("Year cannot be in the future.")
        return value

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be greater than zero.")
        return value

    def validate_type(self, value):
        return clean_text(value, "Type", 50)

    def validate_condition(self, value):
        return clean_text(value, "Condition", 50)

    def validate_description(self, value):
        if value:
            return bleach.clean(value.strip(), tags=[], strip=True)
        return value

    def validate_contactName(self, value):
        return clean_text(value, "Contact name", 150)

    def validate_contactPhone(self, value):
        return clean_text(value, "Contact phone", 32)

    def validate_images(self, files):
        if len(files) > settings.AUTOHUB_MAX_VEHICLE_IMAGES:
            raise serializers.ValidationError(
                f"No more than {settings.AUTOHUB_MAX_VEHICLE_IMAGES} images are allowed."
            )
        for file in files:
            if file.size > settings.AUTOHUB_MAX_IMAGE_SIZE:
                raise serializers.ValidationError("Image file size cannot exceed 5MB.")
            if getattr(file, "content_type", None) not in settings.AUTOHUB_ALLOWED_IMAGE_TYPES:
                raise serializers.ValidationError("Only image files (JPEG, PNG, GIF, WEBP) are allowed!")
        return files
