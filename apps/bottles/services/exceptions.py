"""Domain-specific exceptions for bottles services."""


class BottlesServiceError(Exception):
    """Base exception for bottles services."""
    pass


class SubmissionNotFoundError(BottlesServiceError):
    """Raised when a bottle submission does not exist."""
    pass


class DuplicateSubmissionError(BottlesServiceError):
    """Raised when a user already has a submission for the event."""
    pass


class EventNotFoundError(BottlesServiceError):
    """Raised when the target event does not exist."""
    pass


class UserNotFoundError(BottlesServiceError):
    """Raised when the submission owner does not exist."""
    pass


class InsufficientPermissionsError(BottlesServiceError):
    """Raised when a user edits a bottle that is not theirs."""
    pass
