from rest_framework import permissions


class IsCommentAuthorOrAdmin(permissions.BasePermission):
    """
    Permission: Authors can edit and delete their comments.
    Admins can delete any comment but not rewrite it.
    """

    def has_object_permission(self, request, view, obj):
        if obj.user_id == request.user.id:
            return True

        if request.method == 'DELETE':
            return obj.calendar_day.event.is_admin(request.user)

        return False
