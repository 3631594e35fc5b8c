from rest_framework import serializers
from .models import Event, EventMembership, EventStatus, MemberRole, Announcement
from apps.accounts.serializers import UserMinimalSerializer


class EventSerializer(serializers.ModelSerializer):
    """Main serializer for events."""

    created_by = UserMinimalSerializer(read_only=True)
    member_count = serializers.SerializerMethodField()
    is_member = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = [
            'id',
            'name',
            'year',
            'start_date',
            'end_date',
            'description',
            'status',
            'created_by',
            'member_count',
            'is_member',
            'created_at',
        ]
        read_only_fields = ['id', 'created_by', 'created_at']

    def get_member_count(self, obj):
        return obj.memberships.count()

    def get_is_member(self, obj):
        """Whether the current user holds a membership."""
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            return obj.has_member(request.user)
        return False


class EventCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating events."""

    class Meta:
        model = Event
        fields = ['name', 'year', 'start_date', 'end_date', 'description', 'status']

    def validate(self, attrs):
        if attrs['end_date'] < attrs['start_date']:
            raise serializers.ValidationError({
                'end_date': 'End date must not be before start date'
            })
        return attrs


class EventUpdateSerializer(serializers.Serializer):
    """Validate input for event updates."""

    name = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
    status = serializers.ChoiceField(choices=EventStatus.choices, required=False)


class EventMemberSerializer(serializers.ModelSerializer):
    """Membership with nested user info."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = EventMembership
        fields = ['id', 'user', 'role_override', 'created_at']
        read_only_fields = fields


class AddMemberSerializer(serializers.Serializer):
    """Serializer for adding a member to an event."""

    user_id = serializers.UUIDField(required=True)
    role_override = serializers.ChoiceField(
        choices=MemberRole.choices,
        required=False,
        allow_null=True
    )


class RemoveMemberSerializer(serializers.Serializer):
    """Serializer for removing a member from an event."""

    user_id = serializers.UUIDField(required=True)


class AnnouncementSerializer(serializers.ModelSerializer):
    """Serializer for announcements."""

    created_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Announcement
        fields = ['id', 'event', 'title', 'body', 'created_by', 'created_at']
        read_only_fields = ['id', 'event', 'created_by', 'created_at']


class AnnouncementInputSerializer(serializers.Serializer):
    """Validate announcement create/update input."""

    title = serializers.CharField(max_length=200, required=True)
    body = serializers.CharField(required=False, allow_blank=True, default='')


class AnnouncementUpdateSerializer(serializers.Serializer):
    """Validate partial announcement edits."""

    title = serializers.CharField(max_length=200, required=False)
    body = serializers.CharField(required=False, allow_blank=True)
