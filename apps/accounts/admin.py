# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, UserRole


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for club member profiles.

    Provides:
    - Member listing with club role badge
    - Filtering by role and status
    - Bulk promote/demote actions
    """

    list_display = [
        'email',
        'name',
        'role_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'name',
    ]

    ordering = ['name', 'email']

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Profile', {
            'fields': ('email', 'name', 'avatar_url', 'role')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create Member', {
            'classes': ('wide',),
            'fields': ('email', 'name', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['created_at', 'last_login']

    filter_horizontal = ['groups', 'user_permissions']

    def role_badge(self, obj):
        """Display club role as colored badge."""
        if obj.role == UserRole.ADMIN:
            return format_html(
                '<span style="background: #B8860B; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Admin</span>'
            )
        return format_html(
            '<span style="background: #ccc; color: #666; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Member</span>'
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    actions = ['promote_to_admin', 'demote_to_member']

    @admin.action(description='Promote selected users to admin')
    def promote_to_admin(self, request, queryset):
        count = queryset.update(role=UserRole.ADMIN)
        self.message_user(request, f'Promoted {count} user(s).')

    @admin.action(description='Demote selected users to member')
    def demote_to_member(self, request, queryset):
        """Demote selected users (excludes the acting admin)."""
        safe_queryset = queryset.exclude(pk=request.user.pk)
        count = safe_queryset.update(role=UserRole.USER)
        self.message_user(request, f'Demoted {count} user(s).')
