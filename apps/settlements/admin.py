# ==========================================
# apps/settlements/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Settlement


@admin.register(Settlement)
class SettlementAdmin(admin.ModelAdmin):
    list_display = ['user', 'event', 'settled_badge', 'amount', 'updated_at']
    list_filter = ['has_settled', 'event']
    search_fields = ['user__email', 'user__name', 'event__name']
    readonly_fields = ['id', 'updated_at']

    def settled_badge(self, obj):
        if obj.has_settled:
            return format_html('<span style="color: green;">Settled</span>')
        return format_html('<span style="color: orange;">Open</span>')
    settled_badge.short_description = 'Status'
