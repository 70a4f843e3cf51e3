from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.generics import ListAPIView
from rest_framework.parsers import JSONParser, FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (extend_schema, extend_schema_view, OpenApiParameter,
                                   OpenApiExample, OpenApiResponse)

from ..filters import VehicleFilter
from ..services.vehicle_service import VehicleService
from .serializers import VehicleSerializer, VehicleDetailSerializer, VehicleCreateSerializer
from autohub.bids.api.serializers import BidSerializer
from autohub.bids.services.bid_service import BidService


@extend_schema_view(
    list=extend_schema(
        tags=["Vehicles"],
        summary="List vehicles",
        description="Newest first. Only available vehicles are listed unless `status` is given.",
        parameters=[
            OpenApiParameter(name="brand", type=str, description="Case-insensitive substring match."),
            OpenApiParameter(name="type", type=str),
            OpenApiParameter(name="minPrice", type=OpenApiTypes.DECIMAL),
            OpenApiParameter(name="maxPrice", type=OpenApiTypes.DECIMAL),
            OpenApiParameter(name="minYear", type=int),
            OpenApiParameter(name="maxYear", type=int),
            OpenApiParameter(name="status", type=str, description="`available` (default) or `sold`. Other values match nothing."),
        ],
        responses={200: VehicleSerializer(many=True)},
    ),
    retrieve=extend_schema(
        tags=["Vehicles"],
        summary="Retrieve a vehicle",
        responses={
            200: VehicleDetailSerializer,
            404: OpenApiResponse(
                response={"type": "object", "properties": {"detail": {"type": "string"}}},
                description="Vehicle not found.",
                examples=[OpenApiExample("Not Found", value={"detail": "Vehicle not found"})]
            ),
        },
    ),
    create=extend_schema(
        tags=["Vehicles"],
        summary="Post a vehicle",
        description="Multipart form with 1-10 images (JPEG, PNG, GIF, WEBP; 5MB each).",
        request={"multipart/form-data": VehicleCreateSerializer},
        responses={201: VehicleSerializer},
    ),
)
class VehicleViewSet(mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     mixins.CreateModelMixin,
                     viewsets.GenericViewSet):
    serializer_class = VehicleSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = VehicleFilter
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return VehicleService.base_queryset().order_by("-created_at", "-id")

    def get_permissions(self):
        if self.action == "create":
            return [IsAuthenticated()]
        return [AllowAny()]

    def get_serializer_class(self):
        if self.action == "create":
            return VehicleCreateSerializer
        if self.action == "retrieve":
            return VehicleDetailSerializer
        return VehicleSerializer

    def retrieve(self, request, *args, **kwargs):
        vehicle = VehicleService.get_vehicle(kwargs["pk"])
        return Response(self.get_serializer(vehicle).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        vehicle = VehicleService.create_vehicle(seller=request.user, validated_data=serializer.validated_data)
        return Response(
            {"message": "Vehicle posted successfully", "vehicle": VehicleSerializer(vehicle).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        tags=["Bids"],
        summary="List pending bids for a vehicle",
        description="Pending bids only, highest amount first.",
        responses={200: BidSerializer(many=True)},
    )
    @action(detail=True, methods=["get"], url_path="bids")
    def bids(self, request, pk=None):
        bids = BidService.list_bids(pk)
        return Response(BidSerializer(bids, many=True).data)


@extend_schema(
    tags=["Dashboard"],
    summary="Vehicles you have posted",
    responses={200: VehicleSerializer(many=True)},
)
class UserVehiclesView(ListAPIView):
    serializer_class = VehicleSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return VehicleService.get_user_vehicles(self.request.user)
