"""
Settle-up calculator.

Every participant should end up having paid the same share of the
bottles bought for an event. The calculator compares each participant's
spend with the group average:

    balance = amount_spent - total_spent / participant_count

A positive balance means the participant is owed money, a negative one
means they owe the difference. Balances always sum to zero.

Pure functions over already-fetched records; nothing here reads or
writes the database. Records may be model instances or plain dicts with
``user_id``/``price`` (submissions) and ``user_id``/``has_settled``
(settlements). If a user has more than one record, the last one wins;
uniqueness is enforced by the database.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

ZERO = Decimal('0')


@dataclass(frozen=True)
class SpendingSummary:
    user_id: object
    amount_spent: Decimal
    average_target: Decimal
    balance: Decimal
    has_settled: bool


@dataclass(frozen=True)
class SettleUpSummary:
    total_spent: Decimal
    participant_count: int
    average_target: Decimal
    settled_count: int
    entries: List[SpendingSummary]


def _read(record, name):
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def to_money(value) -> Decimal:
    """Coerce an amount (Decimal, int, float, str or None) to Decimal."""
    if value is None or value == '':
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 0.1 from turning into binary noise
    return Decimal(str(value))


def derive_participants(membership_user_ids: Iterable, submission_user_ids: Iterable) -> list:
    """
    Union of members and submitters, in first-seen order.

    Submitting a bottle implies participation even without a membership.
    Unassigned bottles (user_id None) add nobody.
    """
    participants = []
    seen = set()
    for user_id in [*membership_user_ids, *submission_user_ids]:
        if user_id is None or user_id in seen:
            continue
        seen.add(user_id)
        participants.append(user_id)
    return participants


def calculate_balances(*, participants: Iterable, submissions: Iterable, settlements: Iterable) -> List[SpendingSummary]:
    """
    Compute each participant's balance against the group average.

    Args:
        participants: Deduplicated user IDs (see derive_participants)
        submissions: Bottle submissions of the event
        settlements: Settlement records of the event

    Returns:
        One SpendingSummary per participant, in participant order.
        Empty when there are no participants.
    """
    participants = list(participants)

    spent_by_user = {}
    for submission in submissions:
        user_id = _read(submission, 'user_id')
        if user_id is not None:
            spent_by_user[user_id] = to_money(_read(submission, 'price'))

    settled_by_user = {}
    for settlement in settlements:
        settled_by_user[_read(settlement, 'user_id')] = bool(_read(settlement, 'has_settled'))

    spent = [spent_by_user.get(user_id, ZERO) for user_id in participants]
    total = sum(spent, ZERO)
    average = total / len(participants) if participants else ZERO

    return [
        SpendingSummary(
            user_id=user_id,
            amount_spent=amount,
            average_target=average,
            balance=amount - average,
            has_settled=settled_by_user.get(user_id, False),
        )
        for user_id, amount in zip(participants, spent)
    ]


def summarize_settle_up(*, participants: Iterable, submissions: Iterable, settlements: Iterable) -> SettleUpSummary:
    """Balances plus the totals shown on the settle-up summary cards."""
    entries = calculate_balances(
        participants=participants,
        submissions=submissions,
        settlements=settlements,
    )
    total = sum((entry.amount_spent for entry in entries), ZERO)
    average = entries[0].average_target if entries else ZERO

    return SettleUpSummary(
        total_spent=total,
        participant_count=len(entries),
        average_target=average,
        settled_count=sum(1 for entry in entries if entry.has_settled),
        entries=entries,
    )


def balance_label(balance) -> str:
    """'owed' for a positive balance, 'owes' for a negative one, else 'even'."""
    balance = to_money(balance)
    if balance > 0:
        return 'owed'
    if balance < 0:
        return 'owes'
    return 'even'
