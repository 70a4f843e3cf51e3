from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse
from .serializers import UserRegistrationSerializer, LoginSerializer, LoginResponseSerializer, UserSerializer
from autohub.users.services.user_service import UserService
import logging

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Authentication & Users"],
        summary="Register a new account",
        request=UserRegistrationSerializer,
        responses={
            201: OpenApiResponse(description="Registration successful"),
            400: OpenApiResponse(description="Missing field, weak password or duplicate email"),
        },
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        UserService.register_user(serializer.validated_data)
        return Response({"message": "Registration successful"}, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Authentication & Users"],
        summary="Log in and obtain a bearer token",
        request=LoginSerializer,
        responses={200: LoginResponseSerializer, 401: OpenApiResponse(description="Invalid credentials")},
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        token, user = UserService.login(
            request,
            serializer.validated_data["email"],
            serializer.validated_data["password"],
        )
        logger.info(f"User logged in: {user.email}")
        return Response(LoginResponseSerializer({"token": token, "user": user}).data)


class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Authentication & Users"],
        summary="Get your own profile",
        responses=UserSerializer,
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data)
