from rest_framework import status
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from ..services.booking_service import BookingService
from .serializers import BookingSerializer, BookingCreateSerializer, UserBookingSerializer


class ConfirmBookingView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Bookings"],
        summary="Confirm a booking",
        description="Seller only. Books the vehicle to its highest pending bid and marks it sold.",
        request=BookingCreateSerializer,
        responses={
            201: OpenApiResponse(
                response={"type": "object", "properties": {"message": {"type": "string"}, "booking": {"type": "object"}}},
                description="Booking confirmed.",
            ),
            400: OpenApiResponse(
                response={"type": "object", "properties": {"detail": {"type": "string"}}},
                description="Vehicle already booked or has no bids.",
                examples=[
                    OpenApiExample("Already booked", value={"detail": "Vehicle already booked"}),
                    OpenApiExample("No bids", value={"detail": "No bids available"}),
                ],
            ),
            403: OpenApiResponse(description="Caller is not the seller."),
            404: OpenApiResponse(description="Vehicle not found."),
        },
    )
    def post(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = BookingService.confirm_booking(
            user=request.user,
            vehicle_id=serializer.validated_data["vehicle_id"],
        )
        return Response(
            {"message": "Booking confirmed", "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(
    tags=["Dashboard"],
    summary="Bookings you are part of",
    description="Bookings where you are either the buyer or the seller.",
    responses={200: UserBookingSerializer(many=True)},
)
class UserBookingsView(ListAPIView):
    serializer_class = UserBookingSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return BookingService.get_user_bookings(self.request.user)
