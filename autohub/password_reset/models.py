from django.conf import settings
from django.db import models
from django.utils import timezone


class ResetTokenQuerySet(models.QuerySet):
    def expired(self):
        cutoff = timezone.now() - settings.AUTOHUB_RESET_TOKEN_LIFETIME
        return self.filter(created_at__lte=cutoff)


class ResetToken(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reset_tokens')
    token_hash = models.CharField(max_length=64, db_index=True)  # sha256 hex digest, never the raw token
    created_at = models.DateTimeField(default=timezone.now)

    objects = ResetTokenQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Reset token for {self.user.email}"

    @property
    def expires_at(self):
        return self.created_at + settings.AUTOHUB_RESET_TOKEN_LIFETIME

    def is_expired(self):
        return timezone.now() >= self.expires_at
