from rest_framework import permissions


class IsClubAdmin(permissions.BasePermission):
    """
    Permission: User must hold the club admin role.
    """

    message = 'Only club admins can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_club_admin)
