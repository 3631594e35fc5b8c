from rest_framework import serializers
from .models import User, UserRole


class UserSerializer(serializers.ModelSerializer):
    """Profile serializer for the current user and admin listings."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'display_name',
            'avatar_url',
            'role',
            'created_at',
        ]
        read_only_fields = ['id', 'email', 'role', 'created_at']

    def get_display_name(self, obj):
        return obj.get_display_name()


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'display_name', 'avatar_url']
        read_only_fields = fields

    def get_display_name(self, obj):
        return obj.get_display_name()


class ProfileUpdateSerializer(serializers.Serializer):
    """Validate input for profile updates."""

    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    avatar_url = serializers.URLField(max_length=500, required=False, allow_blank=True)


class UpdateUserRoleSerializer(serializers.Serializer):
    """Serializer for changing a user's club role."""

    role = serializers.ChoiceField(choices=UserRole.choices, required=True)
