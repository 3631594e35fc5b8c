# ==========================================
# apps/advent/admin.py
# ==========================================

import logging

from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from .models import CalendarDay, TastingEntry, Comment
from .services.reveal_policy import is_day_revealed

logger = logging.getLogger(__name__)


@admin.register(CalendarDay)
class CalendarDayAdmin(admin.ModelAdmin):
    list_display = ['day_number', 'event', 'reveal_date', 'bottle_submission', 'is_revealed', 'state_badge']
    list_filter = ['event', 'is_revealed']
    search_fields = ['bottle_submission__whiskey_name']
    readonly_fields = ['id']
    ordering = ['event', 'day_number']
    actions = ['reveal_days', 'hide_days']

    def state_badge(self, obj):
        if is_day_revealed(obj, timezone.localdate()):
            return format_html('<span style="color: green;">Revealed</span>')
        return format_html('<span style="color: gray;">Locked</span>')
    state_badge.short_description = 'State'

    def reveal_days(self, request, queryset):
        updated = queryset.update(is_revealed=True)
        logger.info("%s day(s) revealed from admin by %s", updated, request.user)
        self.message_user(request, f'{updated} day(s) revealed.')
    reveal_days.short_description = 'Reveal selected days'

    def hide_days(self, request, queryset):
        updated = queryset.update(is_revealed=False)
        logger.info("%s day(s) hidden from admin by %s", updated, request.user)
        self.message_user(request, f'{updated} day(s) hidden. Days past their reveal date stay visible.')
    hide_days.short_description = 'Clear manual reveal'


@admin.register(TastingEntry)
class TastingEntryAdmin(admin.ModelAdmin):
    list_display = ['user', 'calendar_day', 'rating', 'would_buy_again', 'updated_at']
    list_filter = ['rating', 'would_buy_again', 'calendar_day__event']
    search_fields = ['user__email', 'user__name', 'tasting_notes']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ['user', 'calendar_day', 'content_preview', 'created_at']
    list_filter = ['calendar_day__event', 'created_at']
    search_fields = ['content', 'user__email', 'user__name']
    readonly_fields = ['id', 'created_at', 'updated_at']

    def content_preview(self, obj):
        return obj.content[:60]
    content_preview.short_description = 'Content'
