import logging
from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction
from rest_framework import serializers
from rest_framework_simplejwt.tokens import AccessToken

from autohub.common.exceptions import InvalidCredentials

logger = logging.getLogger(__name__)
User = get_user_model()


class UserService:

    @staticmethod
    def register_user(validated_data):
        try:
            with transaction.atomic():
                user = User.objects.create_user(**validated_data)
        except IntegrityError:
            # lost a race against a concurrent registration
            raise serializers.ValidationError({"email": ["Email already registered"]})

        logger.info(f"User created: {user.email}")
        return user

    @staticmethod
    def issue_token(user) -> str:
        token = AccessToken.for_user(user)
        token["email"] = user.email
        return str(token)

    @staticmethod
    def login(request, email, password):
        email = User.objects.normalize_email(email)
        user = authenticate(request, email=email, password=password)
        if user is None:
            logger.warning(f"Failed login attempt for {email}")
            raise InvalidCredentials()

        return UserService.issue_token(user), user
