from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from .serializers import (ForgotPasswordSerializer, VerifyResetTokenSerializer, ResetPasswordSerializer,
                          MessageSerializer)
from ..services.reset_service import PasswordResetService


class ForgotPasswordView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Password Reset"],
        summary="Request a password reset email",
        description="Always answers with the same message whether or not the email is registered.",
        request=ForgotPasswordSerializer,
        responses={200: MessageSerializer, 503: OpenApiResponse(description="Email could not be sent")},
    )
    def post(self, request):
        serializer = ForgotPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = PasswordResetService.request_reset(serializer.validated_data["email"])
        return Response({"message": message})


class VerifyResetTokenView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Password Reset"],
        summary="Check that a reset link is still valid",
        parameters=[
            OpenApiParameter(name="token", type=str, location="query", required=True),
            OpenApiParameter(name="email", type=str, location="query", required=True),
        ],
        responses={200: OpenApiResponse(description="Token is valid"), 400: OpenApiResponse(description="Invalid or expired reset link")},
    )
    def get(self, request):
        serializer = VerifyResetTokenSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        PasswordResetService.get_valid_token(
            serializer.validated_data["token"],
            serializer.validated_data["email"],
        )
        return Response({"message": "Token is valid", "valid": True})


class ResetPasswordView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Password Reset"],
        summary="Set a new password using a reset token",
        request=ResetPasswordSerializer,
        responses={200: MessageSerializer, 400: OpenApiResponse(description="Invalid or expired reset link")},
    )
    def post(self, request):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        PasswordResetService.reset_password(
            serializer.validated_data["token"],
            serializer.validated_data["email"],
            serializer.validated_data["new_password"],
        )
        return Response({"message": "Password reset successful! You can now login with your new password."})
