# ==========================================
# apps/bottles/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import BottleSubmission


@admin.register(BottleSubmission)
class BottleSubmissionAdmin(admin.ModelAdmin):
    list_display = ['whiskey_name', 'event', 'owner_display', 'distillery', 'abv', 'price', 'created_at']
    list_filter = ['event', 'country', 'style']
    search_fields = ['whiskey_name', 'distillery', 'user__email', 'user__name']
    readonly_fields = ['id', 'created_at']
    autocomplete_fields = ['user']

    fieldsets = (
        ('Bottle', {
            'fields': ('event', 'user', 'whiskey_name', 'distillery', 'country', 'style')
        }),
        ('Details', {
            'fields': ('abv', 'volume', 'price', 'purchase_url', 'notes')
        }),
        ('Metadata', {
            'fields': ('id', 'created_at'),
            'classes': ('collapse',)
        }),
    )

    def owner_display(self, obj):
        if obj.user is None:
            return format_html('<span style="color: gray;">Unassigned</span>')
        return obj.user.get_display_name()
    owner_display.short_description = 'Owner'
