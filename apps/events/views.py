from django.utils import timezone
from rest_framework import viewsets, status, mixins, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsClubAdmin
from .models import Event, Announcement
from .serializers import (
    EventSerializer,
    EventCreateSerializer,
    EventUpdateSerializer,
    EventMemberSerializer,
    AddMemberSerializer,
    RemoveMemberSerializer,
    AnnouncementSerializer,
    AnnouncementInputSerializer,
    AnnouncementUpdateSerializer,
)
from .permissions import IsEventAdmin, IsEventMemberOrAdmin

from apps.events.services import (
    create_event,
    update_event,
    delete_event,
    get_current_event,
    get_past_events,
    add_member,
    remove_member,
    get_event_members,
    create_announcement,
    update_announcement,
    delete_announcement,
    get_event_announcements,
    # Exceptions
    DuplicateEventYearError,
    InvalidEventDatesError,
    AlreadyMemberError,
    NotMemberError,
    UserNotFoundError,
    InsufficientPermissionsError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class EventPagination(PageNumberPagination):
    """Custom pagination for events."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class EventViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Event CRUD operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all events, newest year first
    create: Create an event with its 24 calendar days (admin only)
    retrieve: Get a specific event
    update: Update an event (admin only)
    partial_update: Partially update an event (admin only)
    destroy: Delete an event (admin only)
    """

    queryset = Event.objects.select_related('created_by').prefetch_related('memberships')
    serializer_class = EventSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = EventPagination

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'create':
            return EventCreateSerializer
        if self.action in ['update', 'partial_update']:
            return EventUpdateSerializer
        return EventSerializer

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action == 'create':
            return [IsAuthenticated(), IsClubAdmin()]
        if self.action in ['update', 'partial_update', 'destroy', 'add_member', 'remove_member']:
            return [IsAuthenticated(), IsEventAdmin()]
        if self.action == 'members':
            return [IsAuthenticated(), IsEventMemberOrAdmin()]
        return [IsAuthenticated()]

    def create(self, request, *args, **kwargs):
        """Create a new event."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            event = create_event(created_by=request.user, **serializer.validated_data)
        except (DuplicateEventYearError, InvalidEventDatesError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        output_serializer = EventSerializer(event, context={'request': request})
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Update an event."""
        event = self.get_object()
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            event = update_event(event_id=event.id, user=request.user, **serializer.validated_data)
        except InvalidEventDatesError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(EventSerializer(event, context={'request': request}).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        """Delete an event."""
        event = self.get_object()
        try:
            delete_event(event_id=event.id, user=request.user)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        responses={200: EventSerializer, 404: ErrorResponseSerializer},
        description="Get the event whose year matches today.",
        tags=['events'],
    )
    @action(detail=False, methods=['get'])
    def current(self, request):
        """Get the event for the current year."""
        event = get_current_event(today=timezone.localdate())
        if event is None:
            return Response(
                {'error': 'No event for the current year'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(EventSerializer(event, context={'request': request}).data)

    @action(detail=False, methods=['get'])
    def history(self, request):
        """Get past and completed events."""
        events = get_past_events(today=timezone.localdate())
        serializer = EventSerializer(events, many=True, context={'request': request})
        return Response(serializer.data)

    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """Get all members of the event."""
        event = self.get_object()
        memberships = get_event_members(event_id=event.id)
        serializer = EventMemberSerializer(memberships, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=AddMemberSerializer,
        responses={
            201: EventMemberSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['events'],
    )
    @action(detail=True, methods=['post'])
    def add_member(self, request, pk=None):
        """Add a member to the event (admin only)."""
        event = self.get_object()
        serializer = AddMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            membership = add_member(
                event_id=event.id,
                user_id=serializer.validated_data['user_id'],
                added_by=request.user,
                role_override=serializer.validated_data.get('role_override')
            )
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AlreadyMemberError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(EventMemberSerializer(membership).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['delete'])
    def remove_member(self, request, pk=None):
        """Remove a member from the event (admin only)."""
        event = self.get_object()
        serializer = RemoveMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            remove_member(
                event_id=event.id,
                user_id=serializer.validated_data['user_id'],
                removed_by=request.user
            )
        except NotMemberError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get', 'post'])
    def announcements(self, request, pk=None):
        """List announcements, or post one (admin only)."""
        event = self.get_object()

        if request.method == 'GET':
            announcements = get_event_announcements(event_id=event.id)
            return Response(AnnouncementSerializer(announcements, many=True).data)

        serializer = AnnouncementInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            announcement = create_announcement(
                event_id=event.id,
                created_by=request.user,
                **serializer.validated_data
            )
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(AnnouncementSerializer(announcement).data, status=status.HTTP_201_CREATED)


class AnnouncementViewSet(
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    Retrieve, edit or delete a single announcement.

    Edits and deletes are admin only (enforced by the service).
    """

    queryset = Announcement.objects.select_related('event', 'created_by')
    serializer_class = AnnouncementSerializer
    permission_classes = [IsAuthenticated]

    def update(self, request, *args, **kwargs):
        announcement = self.get_object()
        serializer = AnnouncementUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            announcement = update_announcement(
                announcement_id=announcement.id,
                user=request.user,
                **serializer.validated_data
            )
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(AnnouncementSerializer(announcement).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        announcement = self.get_object()
        try:
            delete_announcement(announcement_id=announcement.id, user=request.user)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        return Response(status=status.HTTP_204_NO_CONTENT)
