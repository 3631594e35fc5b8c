# ==========================================
# apps/events/admin.py
# ==========================================

from django.contrib import admin
from .models import Event, EventMembership, Announcement


class EventMembershipInline(admin.TabularInline):
    model = EventMembership
    extra = 0
    fields = ['user', 'role_override', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['name', 'year', 'start_date', 'end_date', 'status', 'get_member_count', 'created_at']
    list_filter = ['status', 'year']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at']
    inlines = [EventMembershipInline]

    def get_member_count(self, obj):
        return obj.memberships.count()
    get_member_count.short_description = 'Members'


@admin.register(EventMembership)
class EventMembershipAdmin(admin.ModelAdmin):
    list_display = ['user', 'event', 'role_override', 'created_at']
    list_filter = ['role_override', 'event']
    search_fields = ['user__email', 'user__name', 'event__name']
    readonly_fields = ['id', 'created_at']


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ['title', 'event', 'created_by', 'created_at']
    list_filter = ['event', 'created_at']
    search_fields = ['title', 'body']
    readonly_fields = ['id', 'created_at']
