from django.conf import settings
from django.db import models
from django.db.models import Q
from autohub.inventory.models import Vehicle


class Bid(models.Model):
    STATUS_PENDING = 'pending'
    STATUS_ACCEPTED = 'accepted'
    STATUS_REJECTED = 'rejected'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_ACCEPTED, 'Accepted'),
        (STATUS_REJECTED, 'Rejected'),
    ]

    vehicle = models.ForeignKey(Vehicle, on_delete=models.CASCADE, related_name='bids')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='bids')
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-amount', 'created_at', 'id']
        indexes = [
            models.Index(fields=['vehicle', 'status', '-amount'], name='bids_bid_vehicle_6a1f0e_idx'),
            models.Index(fields=['user', '-created_at'], name='bids_bid_user_id_3c9b2d_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['vehicle'],
                condition=Q(status='accepted'),
                name='unique_accepted_bid_per_vehicle',
            ),
        ]

    def __str__(self):
        return f"Bid of {self.amount} by {self.user.email} on {self.vehicle}"
