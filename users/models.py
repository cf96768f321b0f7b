from django.contrib.auth.models import User
from django.db import models


class UserProfile(models.Model):
    """Public profile of an account; holds the display label and admin flag."""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    username = models.CharField(max_length=150, blank=True, verbose_name='Display name')
    full_name = models.CharField(max_length=255, blank=True)
    avatar_url = models.URLField(blank=True, null=True)
    is_admin = models.BooleanField(default=False, verbose_name='Administrator')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.display_label

    @property
    def display_label(self):
        return self.username or f"User ID: {self.user_id}"
