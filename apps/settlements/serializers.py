from django.conf import settings
from rest_framework import serializers
from .models import Settlement
from .services import balance_label
from apps.accounts.serializers import UserMinimalSerializer


def _money_field(**kwargs):
    return serializers.DecimalField(max_digits=12, decimal_places=2, **kwargs)


class SpendingSummarySerializer(serializers.Serializer):
    """One ledger row. Positive balance = owed money."""

    user_id = serializers.UUIDField()
    user = serializers.SerializerMethodField()
    amount_spent = _money_field()
    average_target = _money_field()
    balance = _money_field()
    balance_status = serializers.SerializerMethodField()
    has_settled = serializers.BooleanField()

    def get_user(self, obj):
        profile = self.context.get('users', {}).get(obj.user_id)
        if profile is None:
            return None
        return UserMinimalSerializer(profile).data

    def get_balance_status(self, obj):
        return balance_label(obj.balance)


class SettleUpSummarySerializer(serializers.Serializer):
    """Summary cards plus the full ledger."""

    currency = serializers.SerializerMethodField()
    total_spent = _money_field()
    participant_count = serializers.IntegerField()
    average_target = _money_field()
    settled_count = serializers.IntegerField()
    entries = serializers.SerializerMethodField()

    def get_currency(self, obj):
        return settings.CLUB_CURRENCY

    def get_entries(self, obj):
        return SpendingSummarySerializer(obj.entries, many=True, context=self.context).data


class SettlementSerializer(serializers.ModelSerializer):
    """Stored settlement record."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Settlement
        fields = ['id', 'event', 'user', 'has_settled', 'amount', 'updated_at']
        read_only_fields = fields


class ToggleSettlementSerializer(serializers.Serializer):
    """Validate an admin settlement update."""

    user_id = serializers.UUIDField()
    has_settled = serializers.BooleanField()
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True
    )
