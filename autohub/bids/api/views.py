from rest_framework import status
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from ..services.bid_service import BidService
from .serializers import BidSerializer, BidCreateSerializer, UserBidSerializer


class PlaceBidView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Bids"],
        summary="Place a bid",
        description="The amount must exceed both the asking price and the current highest pending bid.",
        request=BidCreateSerializer,
        responses={
            201: OpenApiResponse(
                response={"type": "object", "properties": {"message": {"type": "string"}, "bid": {"type": "object"}}},
                description="Bid placed.",
            ),
            400: OpenApiResponse(
                response={"type": "object", "properties": {"detail": {"type": "string"}}},
                description="Amount too low or vehicle no longer available.",
                examples=[
                    OpenApiExample("Below price", value={"detail": "Bid must be higher than current price"}),
                    OpenApiExample("Sold", value={"detail": "Vehicle is no longer available"}),
                ],
            ),
            403: OpenApiResponse(description="Bidding on your own vehicle."),
            404: OpenApiResponse(description="Vehicle not found."),
        },
    )
    def post(self, request):
        serializer = BidCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        bid = BidService.place_bid(
            user=request.user,
            vehicle_id=serializer.validated_data["vehicle_id"],
            amount=serializer.validated_data["amount"],
        )
        return Response(
            {"message": "Bid placed successfully", "bid": BidSerializer(bid).data},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(
    tags=["Dashboard"],
    summary="Bids you have placed",
    responses={200: UserBidSerializer(many=True)},
)
class UserBidsView(ListAPIView):
    serializer_class = UserBidSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return BidService.get_user_bids(self.request.user)
