"""Comment service - public discussion on revealed days."""

from datetime import date
from uuid import UUID

from django.db.models import QuerySet

from apps.accounts.models import User
from apps.advent.models import Comment

from .day_management import get_open_day
from .exceptions import (
    CommentNotFoundError,
    EmptyCommentError,
    InsufficientPermissionsError,
)


def _get_comment(comment_id: UUID) -> Comment:
    try:
        return Comment.objects.select_related('calendar_day__event', 'user').get(id=comment_id)
    except Comment.DoesNotExist:
        raise CommentNotFoundError(f"Comment with ID {comment_id} not found")


def get_day_comments(*, day_id: UUID, user: User, today: date) -> QuerySet[Comment]:
    """
    Comments of a day, oldest first.

    Raises:
        DayNotFoundError: If day doesn't exist
        DayLockedError: If the day is still locked for this user
    """
    day = get_open_day(day_id=day_id, user=user, today=today)
    return day.comments.select_related('user').order_by('created_at')


def post_comment(*, day_id: UUID, user: User, content: str, today: date) -> Comment:
    """
    Post a comment on a revealed day.

    Raises:
        DayNotFoundError: If day doesn't exist
        DayLockedError: If the day is still locked for this user
        EmptyCommentError: If content is blank
    """
    content = (content or '').strip()
    if not content:
        raise EmptyCommentError("Comment cannot be empty")

    day = get_open_day(day_id=day_id, user=user, today=today)

    return Comment.objects.create(calendar_day=day, user=user, content=content)


def update_comment(*, comment_id: UUID, user: User, content: str) -> Comment:
    """
    Edit a comment (author only).

    Raises:
        CommentNotFoundError: If comment doesn't exist
        InsufficientPermissionsError: If user is not the author
        EmptyCommentError: If content is blank
    """
    comment = _get_comment(comment_id)

    if comment.user_id != user.id:
        raise InsufficientPermissionsError("You can only edit your own comments")

    content = (content or '').strip()
    if not content:
        raise EmptyCommentError("Comment cannot be empty")

    comment.content = content
    comment.save(update_fields=['content', 'updated_at'])
    return comment


def delete_comment(*, comment_id: UUID, user: User) -> None:
    """
    Delete a comment (author, or admin for moderation).

    Raises:
        CommentNotFoundError: If comment doesn't exist
        InsufficientPermissionsError: If user is neither author nor admin
    """
    comment = _get_comment(comment_id)

    if comment.user_id != user.id and not comment.calendar_day.event.is_admin(user):
        raise InsufficientPermissionsError("You can only delete your own comments")

    comment.delete()
