from django.contrib.auth.decorators import user_passes_test

from .models import UserProfile


def is_admin(user):
    """Staff accounts and profiles flagged as admin both count"""
    if not user.is_authenticated:
        return False

    if user.is_staff or user.is_superuser:
        return True

    try:
        return user.profile.is_admin
    except UserProfile.DoesNotExist:
        return False


def admin_required(view_func):
    """Restrict a view to administrators; everyone else goes to the login page"""
    return user_passes_test(is_admin, login_url='login')(view_func)


def get_user_label(user):
    """Label for admin tables: the profile username, else 'User ID: <id>'"""
    try:
        label = user.profile.username
    except UserProfile.DoesNotExist:
        label = ''
    return label or f"User ID: {user.pk}"
