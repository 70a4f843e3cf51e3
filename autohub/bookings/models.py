from django.conf import settings
from django.db import models
from autohub.inventory.models import Vehicle
from autohub.bids.models import Bid


class Booking(models.Model):
    STATUS_CONFIRMED = 'confirmed'
    STATUS_CHOICES = [
        (STATUS_CONFIRMED, 'Confirmed'),
    ]

    vehicle = models.OneToOneField(Vehicle, on_delete=models.PROTECT, related_name='booking')
    buyer = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='purchases')
    seller = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='sales')
    bid = models.OneToOneField(Bid, on_delete=models.PROTECT, related_name='booking')
    final_price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_CONFIRMED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Booking of {self.vehicle} by {self.buyer.email} for {self.final_price}"
