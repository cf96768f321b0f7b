from django.contrib.auth.models import User
from django.core.validators import MinValueValidator
from django.db import models

PLACEHOLDER_IMAGE = '/placeholder.svg'


class Turf(models.Model):
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name='Price per hour',
    )
    capacity = models.PositiveIntegerField(default=10, validators=[MinValueValidator(1)])
    image = models.CharField(max_length=500, blank=True, default=PLACEHOLDER_IMAGE)
    features = models.JSONField(default=list, blank=True)
    rating = models.DecimalField(max_digits=3, decimal_places=1, default=0)
    reviews = models.PositiveIntegerField(default=0)
    owner = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='turfs',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def image_url(self):
        return self.image or PLACEHOLDER_IMAGE
