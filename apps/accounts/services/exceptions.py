"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class InsufficientPermissionsError(AccountsServiceError):
    """Raised when a non-admin attempts an admin-only change."""
    pass


class CannotDemoteSelfError(AccountsServiceError):
    """Raised when an admin tries to remove their own admin role."""
    pass
