from django.conf import settings
from django.db import models


class Vehicle(models.Model):
    STATUS_AVAILABLE = 'available'
    STATUS_SOLD = 'sold'
    STATUS_CHOICES = [
        (STATUS_AVAILABLE, 'Available'),
        (STATUS_SOLD, 'Sold'),
    ]

    seller = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='vehicles')
    brand = models.CharField(max_length=100, db_index=True)
    model = models.CharField(max_length=100)
    year = models.IntegerField(db_index=True)
    price = models.DecimalField(max_digits=12, decimal_places=2, db_index=True)
    vehicle_type = models.CharField(max_length=50, db_index=True)
    condition = models.CharField(max_length=50)
    mileage = models.PositiveIntegerField()
    description = models.TextField(blank=True, default='')
    contact_name = models.CharField(max_length=150)
    contact_phone = models.CharField(max_length=32)
    # flips once, available -> sold, when the seller confirms a booking
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_AVAILABLE, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Vehicle'
        verbose_name_plural = 'Vehicles'

    def __str__(self):
        return f"{self.brand} {self.model} ({self.year})"

    @property
    def is_available(self):
        return self.status == self.STATUS_AVAILABLE

    @property
    def image_urls(self):
        return [image.url for image in self.images.all()]


class VehicleImage(models.Model):
    vehicle = models.ForeignKey(Vehicle, on_delete=models.CASCADE, related_name='images')
    url = models.URLField(max_length=1024)
    position = models.PositiveSmallIntegerField(default=0)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['position', 'id']
        constraints = [
            models.UniqueConstraint(fields=['vehicle', 'position'], name='unique_vehicle_image_position'),
        ]

    def __str__(self):
        return f"Image {self.position} for {self.vehicle}"
