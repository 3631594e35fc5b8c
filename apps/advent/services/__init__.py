"""
Advent services - Business logic layer.

Calendar days, tastings, comments and the reveal policy that gates them.
"""

from .exceptions import (
    AdventServiceError,
    EventNotFoundError,
    DayNotFoundError,
    DayLockedError,
    SubmissionNotFoundError,
    BottleNotInEventError,
    InvalidRatingError,
    CommentNotFoundError,
    EmptyCommentError,
    InsufficientPermissionsError,
)

from .reveal_policy import (
    DayState,
    is_revealed_on,
    is_day_revealed,
    day_state,
    can_view_day_content,
    reveal_date_for_day,
    is_today,
)

from .day_management import (
    create_days_for_event,
    get_calendar_day,
    get_open_day,
    get_calendar_for_viewer,
    get_day_detail,
    assign_bottle,
    set_day_revealed,
)

from .tasting_management import (
    get_my_tasting,
    save_tasting,
)

from .comment_management import (
    get_day_comments,
    post_comment,
    update_comment,
    delete_comment,
)

from .statistics import get_tasting_summary

__all__ = [
    # Exceptions
    'AdventServiceError',
    'EventNotFoundError',
    'DayNotFoundError',
    'DayLockedError',
    'SubmissionNotFoundError',
    'BottleNotInEventError',
    'InvalidRatingError',
    'CommentNotFoundError',
    'EmptyCommentError',
    'InsufficientPermissionsError',
    # Reveal policy
    'DayState',
    'is_revealed_on',
    'is_day_revealed',
    'day_state',
    'can_view_day_content',
    'reveal_date_for_day',
    'is_today',
    # Days
    'create_days_for_event',
    'get_calendar_day',
    'get_open_day',
    'get_calendar_for_viewer',
    'get_day_detail',
    'assign_bottle',
    'set_day_revealed',
    # Tastings
    'get_my_tasting',
    'save_tasting',
    # Comments
    'get_day_comments',
    'post_comment',
    'update_comment',
    'delete_comment',
    # Statistics
    'get_tasting_summary',
]
