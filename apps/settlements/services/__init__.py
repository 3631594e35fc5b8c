"""
Settlements services - Business logic layer.

Settle-up balances and the admin settlement toggle.
"""

from .exceptions import (
    SettlementsServiceError,
    EventNotFoundError,
    UserNotFoundError,
    NotParticipantError,
    InsufficientPermissionsError,
)

from .settlement_calculator import (
    SpendingSummary,
    SettleUpSummary,
    derive_participants,
    calculate_balances,
    summarize_settle_up,
    balance_label,
)

from .settlement_management import (
    get_event_participants,
    get_settle_up_summary,
    get_participant_profiles,
    toggle_settlement,
)

__all__ = [
    # Exceptions
    'SettlementsServiceError',
    'EventNotFoundError',
    'UserNotFoundError',
    'NotParticipantError',
    'InsufficientPermissionsError',
    # Calculator
    'SpendingSummary',
    'SettleUpSummary',
    'derive_participants',
    'calculate_balances',
    'summarize_settle_up',
    'balance_label',
    # Services
    'get_event_participants',
    'get_settle_up_summary',
    'get_participant_profiles',
    'toggle_settlement',
]
