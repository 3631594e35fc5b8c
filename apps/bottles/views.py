from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    BottleSubmissionSerializer,
    BottleSubmissionCreateSerializer,
    BottleSubmissionUpdateSerializer,
)
from .permissions import IsSubmissionOwnerOrAdmin

from apps.bottles.services import (
    submit_bottle,
    update_submission,
    delete_submission,
    get_user_submission,
    get_event_submissions,
    get_visible_submissions,
    # Exceptions
    SubmissionNotFoundError,
    DuplicateSubmissionError,
    EventNotFoundError,
    UserNotFoundError,
    InsufficientPermissionsError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class BottlePagination(PageNumberPagination):
    """Custom pagination for bottle submissions."""
    page_size = 30
    page_size_query_param = 'page_size'
    max_page_size = 100


class BottleSubmissionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for bottle submissions.

    list: Submissions visible to the caller (?event= to filter)
    create: Submit a bottle (admins may submit for others or unassigned)
    retrieve: Get a submission
    update: Edit a submission (owner or admin)
    partial_update: Partially edit a submission (owner or admin)
    destroy: Delete a submission (admin only)
    """

    serializer_class = BottleSubmissionSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = BottlePagination

    def get_queryset(self):
        """Admins see every bottle of their events; members only their own."""
        event_id = self.request.query_params.get('event')
        if event_id and self.action == 'list':
            return get_event_submissions(event_id=event_id, viewer=self.request.user)

        return get_visible_submissions(viewer=self.request.user)

    def get_serializer_class(self):
        if self.action == 'create':
            return BottleSubmissionCreateSerializer
        if self.action in ['update', 'partial_update']:
            return BottleSubmissionUpdateSerializer
        return BottleSubmissionSerializer

    def get_permissions(self):
        if self.action in ['update', 'partial_update', 'destroy']:
            return [IsAuthenticated(), IsSubmissionOwnerOrAdmin()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[
            OpenApiParameter('event', OpenApiTypes.UUID, description='Filter by event'),
        ],
        responses={200: BottleSubmissionSerializer(many=True)},
        tags=['bottles'],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        request=BottleSubmissionCreateSerializer,
        responses={
            201: BottleSubmissionSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['bottles'],
    )
    def create(self, request, *args, **kwargs):
        """Submit a bottle for an event."""
        serializer = BottleSubmissionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        event = data.pop('event')

        try:
            submission = submit_bottle(
                event_id=event.id,
                submitted_by=request.user,
                owner_id=data.pop('user_id', None),
                unassigned=data.pop('unassigned', False),
                **data
            )
        except DuplicateSubmissionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (EventNotFoundError, UserNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(
            BottleSubmissionSerializer(submission).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=BottleSubmissionUpdateSerializer,
        responses={
            200: BottleSubmissionSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['bottles'],
    )
    def update(self, request, *args, **kwargs):
        """Edit a bottle submission."""
        submission = self.get_object()
        serializer = BottleSubmissionUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)

        try:
            submission = update_submission(
                submission_id=submission.id,
                user=request.user,
                owner_id=data.pop('user_id', None),
                **data
            )
        except DuplicateSubmissionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (SubmissionNotFoundError, UserNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(BottleSubmissionSerializer(submission).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        """Delete a submission (admin only)."""
        submission = self.get_object()
        try:
            delete_submission(submission_id=submission.id, user=request.user)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except SubmissionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('event', OpenApiTypes.UUID, required=True, description='Event ID'),
        ],
        responses={200: BottleSubmissionSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        description="Get the caller's own bottle for an event.",
        tags=['bottles'],
    )
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Get my submission for the event."""
        event_id = request.query_params.get('event')
        if not event_id:
            return Response(
                {'error': 'event query parameter is required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        submission = get_user_submission(event_id=event_id, user=request.user)
        if submission is None:
            return Response(
                {'error': 'You have not submitted a bottle for this event'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(BottleSubmissionSerializer(submission).data)
