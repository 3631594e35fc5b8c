from django.utils import timezone
from rest_framework import viewsets, status, mixins, serializers as drf_serializers
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import CalendarDay, Comment
from .serializers import (
    CalendarGridDaySerializer,
    DayDetailSerializer,
    CalendarDayAdminSerializer,
    AssignBottleSerializer,
    RevealDaySerializer,
    TastingEntrySerializer,
    TastingInputSerializer,
    CommentSerializer,
    CommentInputSerializer,
)
from .permissions import IsCommentAuthorOrAdmin

from apps.advent.services import (
    get_calendar_for_viewer,
    get_day_detail,
    assign_bottle,
    set_day_revealed,
    get_my_tasting,
    save_tasting,
    get_day_comments,
    post_comment,
    update_comment,
    delete_comment,
    # Exceptions
    EventNotFoundError,
    DayNotFoundError,
    DayLockedError,
    SubmissionNotFoundError,
    BottleNotInEventError,
    InvalidRatingError,
    EmptyCommentError,
    InsufficientPermissionsError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    responses={200: CalendarGridDaySerializer(many=True), 404: ErrorResponseSerializer},
    description="Calendar grid of an event with the derived reveal state of each day.",
    tags=['advent'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def event_calendar(request, event_id):
    """Get the 24-day grid for an event."""
    try:
        days = get_calendar_for_viewer(
            event_id=event_id,
            user=request.user,
            today=timezone.localdate()
        )
    except EventNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(CalendarGridDaySerializer(days, many=True).data)


class CalendarDayViewSet(viewsets.GenericViewSet):
    """
    Calendar day endpoints.

    retrieve: Day detail, content withheld while locked
    assign: Put a bottle behind the door (admin only)
    reveal: Set the manual reveal flag (admin only)
    tasting: Get or save own tasting notes
    comments: List or post comments
    """

    queryset = CalendarDay.objects.select_related('event')
    permission_classes = [IsAuthenticated]
    serializer_class = DayDetailSerializer
    lookup_value_regex = '[0-9a-f-]{36}'

    @extend_schema(
        responses={200: DayDetailSerializer, 404: ErrorResponseSerializer},
        tags=['advent'],
    )
    def retrieve(self, request, pk=None):
        """Get day detail for the current user."""
        try:
            detail = get_day_detail(day_id=pk, user=request.user, today=timezone.localdate())
        except DayNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(DayDetailSerializer(detail).data)

    @extend_schema(
        request=AssignBottleSerializer,
        responses={
            200: CalendarDayAdminSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['advent'],
    )
    @action(detail=True, methods=['post'])
    def assign(self, request, pk=None):
        """Assign or clear the day's bottle (admin only)."""
        serializer = AssignBottleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            day = assign_bottle(
                day_id=pk,
                bottle_submission_id=serializer.validated_data['bottle_submission_id'],
                assigned_by=request.user
            )
        except (DayNotFoundError, SubmissionNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except BottleNotInEventError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(CalendarDayAdminSerializer(day).data)

    @extend_schema(
        request=RevealDaySerializer,
        responses={
            200: CalendarDayAdminSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['advent'],
    )
    @action(detail=True, methods=['post'])
    def reveal(self, request, pk=None):
        """Reveal or hide the day (admin only)."""
        serializer = RevealDaySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            day = set_day_revealed(
                day_id=pk,
                is_revealed=serializer.validated_data['is_revealed'],
                updated_by=request.user
            )
        except DayNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(CalendarDayAdminSerializer(day).data)

    @extend_schema(
        methods=['GET'],
        responses={
            200: TastingEntrySerializer,
            204: None,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['advent'],
    )
    @extend_schema(
        methods=['PUT'],
        request=TastingInputSerializer,
        responses={
            200: TastingEntrySerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['advent'],
    )
    @action(detail=True, methods=['get', 'put'])
    def tasting(self, request, pk=None):
        """Get or save own tasting notes for the day."""
        today = timezone.localdate()

        if request.method == 'GET':
            try:
                entry = get_my_tasting(day_id=pk, user=request.user, today=today)
            except DayNotFoundError as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
            except DayLockedError as e:
                return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

            if entry is None:
                return Response(status=status.HTTP_204_NO_CONTENT)
            return Response(TastingEntrySerializer(entry).data)

        serializer = TastingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = save_tasting(
                day_id=pk,
                user=request.user,
                today=today,
                **serializer.validated_data
            )
        except DayNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DayLockedError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidRatingError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(TastingEntrySerializer(entry).data)

    @extend_schema(
        methods=['GET'],
        responses={200: CommentSerializer(many=True), 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=['advent'],
    )
    @extend_schema(
        methods=['POST'],
        request=CommentInputSerializer,
        responses={
            201: CommentSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['advent'],
    )
    @action(detail=True, methods=['get', 'post'])
    def comments(self, request, pk=None):
        """List or post comments on the day."""
        today = timezone.localdate()

        if request.method == 'GET':
            try:
                comments = get_day_comments(day_id=pk, user=request.user, today=today)
            except DayNotFoundError as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
            except DayLockedError as e:
                return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
            return Response(CommentSerializer(comments, many=True).data)

        serializer = CommentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            comment = post_comment(
                day_id=pk,
                user=request.user,
                content=serializer.validated_data['content'],
                today=today
            )
        except DayNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DayLockedError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except EmptyCommentError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)


class CommentViewSet(
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    Edit or delete a single comment.

    Authors edit their own comments; admins may delete any.
    """

    queryset = Comment.objects.select_related('calendar_day__event', 'user')
    serializer_class = CommentSerializer
    permission_classes = [IsAuthenticated, IsCommentAuthorOrAdmin]

    @extend_schema(
        request=CommentInputSerializer,
        responses={200: CommentSerializer, 400: ErrorResponseSerializer, 403: ErrorResponseSerializer},
        tags=['advent'],
    )
    def update(self, request, *args, **kwargs):
        comment = self.get_object()
        serializer = CommentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            comment = update_comment(
                comment_id=comment.id,
                user=request.user,
                content=serializer.validated_data['content']
            )
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except EmptyCommentError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CommentSerializer(comment).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        comment = self.get_object()
        try:
            delete_comment(comment_id=comment.id, user=request.user)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        return Response(status=status.HTTP_204_NO_CONTENT)
