"""
Domain-specific exceptions for events app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class EventsServiceError(Exception):
    """Base exception for all events service errors."""
    pass


class EventNotFoundError(EventsServiceError):
    """Raised when an event does not exist."""
    pass


class DuplicateEventYearError(EventsServiceError):
    """Raised when an event already exists for the given year."""
    pass


class InvalidEventDatesError(EventsServiceError):
    """Raised when an event ends before it starts."""
    pass


class AlreadyMemberError(EventsServiceError):
    """Raised when a user is already a member of the event."""
    pass


class NotMemberError(EventsServiceError):
    """Raised when a user is not a member of the event."""
    pass


class UserNotFoundError(EventsServiceError):
    """Raised when the referenced user does not exist."""
    pass


class AnnouncementNotFoundError(EventsServiceError):
    """Raised when an announcement does not exist."""
    pass


class InsufficientPermissionsError(EventsServiceError):
    """Raised when a user lacks required permissions for an action."""
    pass
