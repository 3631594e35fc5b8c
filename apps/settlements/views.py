from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    SettleUpSummarySerializer,
    SettlementSerializer,
    ToggleSettlementSerializer,
)
from .services import (
    get_settle_up_summary,
    get_participant_profiles,
    toggle_settlement,
    EventNotFoundError,
    UserNotFoundError,
    NotParticipantError,
    InsufficientPermissionsError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    responses={
        200: SettleUpSummarySerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Settle-up ledger of an event: who spent what and who owes whom.",
    tags=['settlements'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def settle_up_summary(request, event_id):
    """Get the settle-up summary for an event."""
    try:
        summary = get_settle_up_summary(event_id=event_id, viewer=request.user)
    except EventNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InsufficientPermissionsError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    users = get_participant_profiles(user_ids=[entry.user_id for entry in summary.entries])
    serializer = SettleUpSummarySerializer(summary, context={'users': users})
    return Response(serializer.data)


@extend_schema(
    request=ToggleSettlementSerializer,
    responses={
        200: SettlementSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Mark a participant as settled or unsettled (admin only).",
    tags=['settlements'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_settlement_view(request, event_id):
    """Set a participant's settled flag."""
    serializer = ToggleSettlementSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        settlement = toggle_settlement(
            event_id=event_id,
            updated_by=request.user,
            **serializer.validated_data
        )
    except (EventNotFoundError, UserNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotParticipantError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except InsufficientPermissionsError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(SettlementSerializer(settlement).data)
