from rest_framework import permissions


class IsSubmissionOwnerOrAdmin(permissions.BasePermission):
    """
    Permission: Only the bottle owner or an admin of its event can modify a submission.
    """

    message = 'You can only edit your own bottle.'

    def has_object_permission(self, request, view, obj):
        if obj.event.is_admin(request.user):
            return True
        return obj.user_id is not None and obj.user_id == request.user.id
