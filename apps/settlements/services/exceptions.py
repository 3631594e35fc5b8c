"""Domain-specific exceptions for settlements services."""


class SettlementsServiceError(Exception):
    """Base exception for settlements services."""
    pass


class EventNotFoundError(SettlementsServiceError):
    """Raised when the event does not exist."""
    pass


class UserNotFoundError(SettlementsServiceError):
    """Raised when the settling user does not exist."""
    pass


class NotParticipantError(SettlementsServiceError):
    """Raised when settling a user who takes no part in the event."""
    pass


class InsufficientPermissionsError(SettlementsServiceError):
    """Raised when a user lacks permission for a settle-up operation."""
    pass
