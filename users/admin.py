from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.contrib.auth.models import User

from .models import UserProfile


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False
    verbose_name_plural = 'Profile'
    fields = ('username', 'full_name', 'avatar_url', 'is_admin')


class CustomUserAdmin(UserAdmin):
    inlines = (UserProfileInline,)
    list_display = ('username', 'email', 'is_admin', 'date_joined', 'is_staff')

    def is_admin(self, obj):
        return obj.profile.is_admin if hasattr(obj, 'profile') else False

    is_admin.boolean = True
    is_admin.short_description = 'Admin'


admin.site.unregister(User)
admin.site.register(User, CustomUserAdmin)


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'username', 'is_admin', 'created_at')
    list_filter = ('is_admin', 'created_at')
    search_fields = ('user__username', 'username', 'full_name')
