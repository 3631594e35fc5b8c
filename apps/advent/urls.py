from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'advent'

router = DefaultRouter()
router.register(r'days', views.CalendarDayViewSet, basename='day')
router.register(r'comments', views.CommentViewSet, basename='comment')

urlpatterns = [
    # GET    /api/advent/events/{event_id}/days/  - Calendar grid
    path('events/<uuid:event_id>/days/', views.event_calendar, name='event-calendar'),

    # Day routes
    # GET    /api/advent/days/{id}/               - Day detail (gated)
    # POST   /api/advent/days/{id}/assign/        - Assign bottle (admin)
    # POST   /api/advent/days/{id}/reveal/        - Toggle manual reveal (admin)
    # GET    /api/advent/days/{id}/tasting/       - Own tasting
    # PUT    /api/advent/days/{id}/tasting/       - Save own tasting
    # GET    /api/advent/days/{id}/comments/      - List comments
    # POST   /api/advent/days/{id}/comments/      - Post comment

    # Comment routes
    # PATCH  /api/advent/comments/{id}/           - Edit own comment
    # DELETE /api/advent/comments/{id}/           - Delete comment (author or admin)

    path('', include(router.urls)),
]
