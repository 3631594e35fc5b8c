"""
Events app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    EventsServiceError,
    EventNotFoundError,
    DuplicateEventYearError,
    InvalidEventDatesError,
    AlreadyMemberError,
    NotMemberError,
    UserNotFoundError,
    AnnouncementNotFoundError,
    InsufficientPermissionsError,
)

from .event_management import (
    create_event,
    get_event_by_id,
    update_event,
    delete_event,
    get_current_event,
    get_past_events,
)

from .membership_management import (
    add_member,
    remove_member,
    get_event_members,
    get_member_user_ids,
)

from .announcement_management import (
    create_announcement,
    update_announcement,
    delete_announcement,
    get_event_announcements,
)


__all__ = [
    # Exceptions
    'EventsServiceError',
    'EventNotFoundError',
    'DuplicateEventYearError',
    'InvalidEventDatesError',
    'AlreadyMemberError',
    'NotMemberError',
    'UserNotFoundError',
    'AnnouncementNotFoundError',
    'InsufficientPermissionsError',

    # Event Management
    'create_event',
    'get_event_by_id',
    'update_event',
    'delete_event',
    'get_current_event',
    'get_past_events',

    # Membership Management
    'add_member',
    'remove_member',
    'get_event_members',
    'get_member_user_ids',

    # Announcements
    'create_announcement',
    'update_announcement',
    'delete_announcement',
    'get_event_announcements',
]
