"""
Bottles services - Business logic layer.

Bottle submission CRUD and lookups used by the calendar and settle-up.
"""

from .exceptions import (
    BottlesServiceError,
    SubmissionNotFoundError,
    DuplicateSubmissionError,
    EventNotFoundError,
    UserNotFoundError,
    InsufficientPermissionsError,
)

from .submission_management import (
    submit_bottle,
    update_submission,
    delete_submission,
    get_user_submission,
    get_event_submissions,
    get_visible_submissions,
    get_submission_user_ids,
)

__all__ = [
    # Exceptions
    'BottlesServiceError',
    'SubmissionNotFoundError',
    'DuplicateSubmissionError',
    'EventNotFoundError',
    'UserNotFoundError',
    'InsufficientPermissionsError',
    # Services
    'submit_bottle',
    'update_submission',
    'delete_submission',
    'get_user_submission',
    'get_event_submissions',
    'get_visible_submissions',
    'get_submission_user_ids',
]
