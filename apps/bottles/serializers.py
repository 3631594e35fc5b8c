from rest_framework import serializers
from .models import BottleSubmission
from apps.accounts.serializers import UserMinimalSerializer


class BottleSubmissionSerializer(serializers.ModelSerializer):
    """Full bottle submission with owner info."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = BottleSubmission
        fields = [
            'id',
            'event',
            'user',
            'whiskey_name',
            'distillery',
            'country',
            'style',
            'abv',
            'volume',
            'price',
            'purchase_url',
            'notes',
            'created_at',
        ]
        read_only_fields = ['id', 'event', 'user', 'created_at']


class BottleSubmissionCreateSerializer(serializers.ModelSerializer):
    """
    Validate a new submission.

    user_id and unassigned are only honoured for admins.
    """

    user_id = serializers.UUIDField(required=False, allow_null=True, write_only=True)
    unassigned = serializers.BooleanField(required=False, default=False, write_only=True)

    class Meta:
        model = BottleSubmission
        fields = [
            'event',
            'user_id',
            'unassigned',
            'whiskey_name',
            'distillery',
            'country',
            'style',
            'abv',
            'volume',
            'price',
            'purchase_url',
            'notes',
        ]
        # The conditional unique constraint is checked by the service layer
        validators = []

    def validate_whiskey_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Whiskey name is required')
        return value


class BottleSubmissionUpdateSerializer(serializers.ModelSerializer):
    """Validate partial edits of a submission."""

    user_id = serializers.UUIDField(required=False, write_only=True)

    class Meta:
        model = BottleSubmission
        fields = [
            'user_id',
            'whiskey_name',
            'distillery',
            'country',
            'style',
            'abv',
            'volume',
            'price',
            'purchase_url',
            'notes',
        ]
        extra_kwargs = {field: {'required': False} for field in fields}


class BottleRevealSerializer(serializers.ModelSerializer):
    """Bottle details shown on a revealed calendar day."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = BottleSubmission
        fields = [
            'id',
            'user',
            'whiskey_name',
            'distillery',
            'country',
            'style',
            'abv',
            'volume',
            'notes',
        ]
        read_only_fields = fields
