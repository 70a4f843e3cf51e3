import hashlib
import logging
import secrets
from smtplib import SMTPException
from urllib.parse import urlencode

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.mail import send_mail
from django.db import transaction
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from autohub.common.exceptions import EmailDeliveryFailed, InvalidArgument
from ..models import ResetToken

logger = logging.getLogger(__name__)
User = get_user_model()

GENERIC_ACK = "If an account exists with this email, a reset link has been sent."


def hash_token(raw_token):
    return hashlib.sha256(raw_token.encode()).hexdigest()


class PasswordResetService:

    @staticmethod
    def build_reset_url(raw_token, email):
        query = urlencode({"token": raw_token, "email": email})
        return f"{settings.FRONTEND_BASE_URL.rstrip('/')}/reset-password?{query}"

    @staticmethod
    def _send(user, subject, template, context):
        html_message = render_to_string(template, {"user": user, **context})
        send_mail(
            subject=subject,
            message=strip_tags(html_message),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[user.email],
            html_message=html_message,
        )

    @staticmethod
    def request_reset(email):
        """
        Issue a reset token and email its link. Always returns the same
        acknowledgement so callers cannot probe which emails are registered.
        """
        user = User.objects.filter(email__iexact=email.strip()).first()
        if user is None:
            logger.info("Password reset requested for unknown email")
            return GENERIC_ACK

        raw_token = secrets.token_hex(32)
        with transaction.atomic():
            ResetToken.objects.filter(user=user).delete()
            ResetToken.objects.create(user=user, token_hash=hash_token(raw_token))

        reset_url = PasswordResetService.build_reset_url(raw_token, user.email)
        try:
            PasswordResetService._send(
                user,
                "AutoHub - Password Reset Request",
                "emails/password_reset.html",
                {
                    "reset_url": reset_url,
                    "lifetime_minutes": int(settings.AUTOHUB_RESET_TOKEN_LIFETIME.total_seconds() // 60),
                },
            )
        except (SMTPException, OSError) as e:
            logger.error(f"Failed to send reset email to user_id={user.id}: {e}")
            raise EmailDeliveryFailed("Error sending reset email. Please try again.")

        logger.info(f"Password reset email sent to user_id={user.id}")
        return GENERIC_ACK

    @staticmethod
    def get_valid_token(raw_token, email):
        user = User.objects.filter(email__iexact=email.strip()).first()
        if user is None:
            raise InvalidArgument("Invalid reset link")

        reset_token = ResetToken.objects.filter(user=user, token_hash=hash_token(raw_token)).first()
        # expired rows are removed by the purge_reset_tokens command
        if reset_token is None or reset_token.is_expired():
            raise InvalidArgument("Invalid or expired reset link")

        return user, reset_token

    @staticmethod
    def reset_password(raw_token, email, new_password):
        with transaction.atomic():
            user, reset_token = PasswordResetService.get_valid_token(raw_token, email)
            user.set_password(new_password)
            user.save(update_fields=["password"])
            reset_token.delete()

        logger.info(f"Password reset completed for user_id={user.id}")

        try:
            PasswordResetService._send(
                user,
                "AutoHub - Password Changed Successfully",
                "emails/password_changed.html",
                {},
            )
        except (SMTPException, OSError) as e:
            # the password is already changed; the notice is informational
            logger.warning(f"Failed to send password changed email to user_id={user.id}: {e}")

        return user
