"""Statistics service - Tasting aggregates for a calendar day."""

from django.db.models import Avg, Count, Q
from uuid import UUID

from apps.advent.models import TastingEntry


def get_tasting_summary(*, day_id: UUID) -> dict:
    """
    Aggregate the tastings logged for one day.

    Individual notes stay private; only the aggregate is shared.

    Args:
        day_id: UUID of the calendar day

    Returns:
        Dictionary with statistics:
        - tasting_count: int - Number of tasting entries
        - rated_count: int - Entries with a rating
        - avg_rating: float - Average rating (rounded to 2 decimals), 0 if none
        - rating_distribution: dict - Count for each rating (1-10)
        - would_buy_again_count: int - Entries answering yes
        - would_buy_again_pct: float - Share of answered entries saying yes (0-100)

    Example:
        >>> summary = get_tasting_summary(day_id=day.id)
        >>> summary['avg_rating']
        7.5
    """
    queryset = TastingEntry.objects.filter(calendar_day_id=day_id)

    totals = queryset.aggregate(
        tasting_count=Count('id'),
        rated_count=Count('rating'),
        avg=Avg('rating'),
        answered=Count('would_buy_again'),
        yes=Count('id', filter=Q(would_buy_again=True)),
    )

    rating_dist = {str(i): 0 for i in range(1, 11)}
    for row in queryset.exclude(rating__isnull=True).values('rating').annotate(count=Count('id')):
        rating_dist[str(row['rating'])] = row['count']

    answered = totals['answered']
    pct = round(totals['yes'] * 100 / answered, 1) if answered else 0

    return {
        'tasting_count': totals['tasting_count'],
        'rated_count': totals['rated_count'],
        'avg_rating': round(float(totals['avg']), 2) if totals['avg'] is not None else 0,
        'rating_distribution': rating_dist,
        'would_buy_again_count': totals['yes'],
        'would_buy_again_pct': pct,
    }
