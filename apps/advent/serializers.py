from rest_framework import serializers
from .models import CalendarDay, TastingEntry, Comment
from apps.accounts.serializers import UserMinimalSerializer
from apps.bottles.serializers import BottleRevealSerializer


class CalendarGridDaySerializer(serializers.Serializer):
    """One cell of the calendar grid."""

    id = serializers.UUIDField()
    day_number = serializers.IntegerField()
    reveal_date = serializers.DateField(allow_null=True)
    is_revealed = serializers.BooleanField()
    is_today = serializers.BooleanField()
    has_bottle = serializers.BooleanField()
    can_view = serializers.BooleanField()


class CommentSerializer(serializers.ModelSerializer):
    """Serializer for day comments."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'calendar_day', 'user', 'content', 'created_at', 'updated_at']
        read_only_fields = ['id', 'calendar_day', 'user', 'created_at', 'updated_at']


class CommentInputSerializer(serializers.Serializer):
    """Validate comment content."""

    content = serializers.CharField(max_length=2000)


class TastingSummarySerializer(serializers.Serializer):
    """Aggregate of the tastings logged for a day."""

    tasting_count = serializers.IntegerField()
    rated_count = serializers.IntegerField()
    avg_rating = serializers.FloatField()
    rating_distribution = serializers.DictField(child=serializers.IntegerField())
    would_buy_again_count = serializers.IntegerField()
    would_buy_again_pct = serializers.FloatField()


class DayDetailSerializer(serializers.Serializer):
    """
    Day detail as seen by the requesting user.

    bottle, tasting_summary and comments are empty while locked.
    """

    id = serializers.UUIDField(source='day.id')
    event = serializers.UUIDField(source='day.event_id')
    day_number = serializers.IntegerField(source='day.day_number')
    reveal_date = serializers.DateField(source='day.reveal_date', allow_null=True)
    is_revealed = serializers.BooleanField()
    locked = serializers.BooleanField()
    has_bottle = serializers.BooleanField()
    bottle = BottleRevealSerializer(allow_null=True)
    tasting_summary = TastingSummarySerializer(allow_null=True)
    comments = CommentSerializer(many=True)


class CalendarDayAdminSerializer(serializers.ModelSerializer):
    """Raw day state returned after admin changes."""

    bottle_submission = BottleRevealSerializer(read_only=True)

    class Meta:
        model = CalendarDay
        fields = ['id', 'event', 'day_number', 'reveal_date', 'is_revealed', 'bottle_submission']
        read_only_fields = fields


class AssignBottleSerializer(serializers.Serializer):
    """Bottle to put behind a door; null clears the assignment."""

    bottle_submission_id = serializers.UUIDField(allow_null=True)


class RevealDaySerializer(serializers.Serializer):
    is_revealed = serializers.BooleanField()


class TastingEntrySerializer(serializers.ModelSerializer):
    """The requesting user's own tasting notes."""

    class Meta:
        model = TastingEntry
        fields = ['id', 'calendar_day', 'rating', 'tasting_notes', 'would_buy_again', 'created_at', 'updated_at']
        read_only_fields = ['id', 'calendar_day', 'created_at', 'updated_at']


class TastingInputSerializer(serializers.Serializer):
    """Validate tasting input."""

    rating = serializers.IntegerField(min_value=1, max_value=10, required=False, allow_null=True)
    tasting_notes = serializers.CharField(required=False, allow_blank=True, default='')
    would_buy_again = serializers.BooleanField(required=False, allow_null=True, default=None)
