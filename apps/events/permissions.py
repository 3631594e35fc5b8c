from rest_framework import permissions


class IsEventAdmin(permissions.BasePermission):
    """
    Permission: User must be a club admin or hold an admin override on the event.
    """

    def has_object_permission(self, request, view, obj):
        # obj is an Event instance
        return obj.is_admin(request.user)


class IsEventMemberOrAdmin(permissions.BasePermission):
    """
    Permission: User must be a member of the event (admins always pass).
    """

    message = 'You must be a member of this event.'

    def has_object_permission(self, request, view, obj):
        # obj is an Event instance
        return obj.is_admin(request.user) or obj.has_member(request.user)
