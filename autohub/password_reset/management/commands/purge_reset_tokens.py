from django.core.management.base import BaseCommand
from autohub.password_reset.models import ResetToken


class Command(BaseCommand):
    help = "Delete password reset tokens older than their one-hour lifetime"

    def handle(self, *args, **options):
        deleted, _ = ResetToken.objects.expired().delete()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} expired reset token(s)"))
