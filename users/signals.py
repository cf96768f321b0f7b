from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserProfile


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    """Every account gets a profile; the label defaults to the email or username."""
    if created:
        UserProfile.objects.create(
            user=instance,
            username=instance.email or instance.username,
            full_name=instance.get_full_name(),
        )
    else:
        UserProfile.objects.get_or_create(
            user=instance,
            defaults={'username': instance.email or instance.username},
        )
