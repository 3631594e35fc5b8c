"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserNotFoundError,
    InsufficientPermissionsError,
    CannotDemoteSelfError,
)
from .account_management import (
    update_profile,
    list_users,
    update_user_role,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserNotFoundError',
    'InsufficientPermissionsError',
    'CannotDemoteSelfError',
    # Services
    'update_profile',
    'list_users',
    'update_user_role',
]
