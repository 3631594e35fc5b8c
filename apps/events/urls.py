from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'events'

# Note: announcements must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'announcements', views.AnnouncementViewSet, basename='announcement')
router.register(r'', views.EventViewSet, basename='event')

urlpatterns = [
    # Event ViewSet routes
    # GET    /api/events/              - List events
    # POST   /api/events/              - Create event + 24 days (admin)
    # GET    /api/events/{id}/         - Get event details
    # PATCH  /api/events/{id}/         - Update event (admin)
    # DELETE /api/events/{id}/         - Delete event (admin)

    # Custom event actions
    # GET    /api/events/current/                 - Event for the current year
    # GET    /api/events/history/                 - Past/completed events
    # GET    /api/events/{id}/members/            - List members
    # POST   /api/events/{id}/add_member/         - Add member (admin)
    # DELETE /api/events/{id}/remove_member/      - Remove member (admin)
    # GET    /api/events/{id}/announcements/      - List announcements
    # POST   /api/events/{id}/announcements/      - Post announcement (admin)

    # Announcement routes
    # GET    /api/events/announcements/{id}/      - Get announcement
    # PATCH  /api/events/announcements/{id}/      - Edit announcement (admin)
    # DELETE /api/events/announcements/{id}/      - Delete announcement (admin)

    path('', include(router.urls)),
]
