"""Domain-specific exceptions for advent calendar services."""


class AdventServiceError(Exception):
    """Base exception for advent calendar services."""
    pass


class EventNotFoundError(AdventServiceError):
    """Raised when the event does not exist."""
    pass


class DayNotFoundError(AdventServiceError):
    """Raised when a calendar day does not exist."""
    pass


class DayLockedError(AdventServiceError):
    """Raised when a member acts on a day that is not revealed yet."""
    pass


class SubmissionNotFoundError(AdventServiceError):
    """Raised when the bottle to assign does not exist."""
    pass


class BottleNotInEventError(AdventServiceError):
    """Raised when assigning a bottle from another event."""
    pass


class InvalidRatingError(AdventServiceError):
    """Raised when a tasting rating is outside 1..10."""
    pass


class CommentNotFoundError(AdventServiceError):
    """Raised when a comment does not exist."""
    pass


class EmptyCommentError(AdventServiceError):
    """Raised when a comment has no content."""
    pass


class InsufficientPermissionsError(AdventServiceError):
    """Raised when a user lacks admin rights or comment ownership."""
    pass
