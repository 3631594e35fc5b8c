from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .permissions import IsClubAdmin
from .serializers import (
    UserSerializer,
    ProfileUpdateSerializer,
    UpdateUserRoleSerializer,
)
from .services import (
    update_profile,
    list_users,
    update_user_role,
    UserNotFoundError,
    InsufficientPermissionsError,
    CannotDemoteSelfError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={200: UserSerializer},
    description="Get the current user's profile.",
    tags=['accounts'],
)
@extend_schema(
    methods=['PATCH'],
    request=ProfileUpdateSerializer,
    responses={200: UserSerializer, 400: ErrorResponseSerializer},
    description="Update the current user's name or avatar URL.",
    tags=['accounts'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def current_profile(request):
    """Get or update current user profile."""
    if request.method == 'GET':
        return Response(UserSerializer(request.user).data)

    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_profile(user=request.user, **serializer.validated_data)
    return Response(UserSerializer(user).data)


@extend_schema(
    responses={200: UserSerializer(many=True)},
    description="List all club members (admin only).",
    tags=['accounts'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsClubAdmin])
def user_list(request):
    """List all active users."""
    serializer = UserSerializer(list_users(), many=True)
    return Response(serializer.data)


@extend_schema(
    request=UpdateUserRoleSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Change a user's club role (admin only).",
    tags=['accounts'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsClubAdmin])
def update_role(request, pk):
    """Update a user's club role."""
    serializer = UpdateUserRoleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_user_role(
            user_id=pk,
            role=serializer.validated_data['role'],
            updated_by=request.user
        )
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InsufficientPermissionsError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except CannotDemoteSelfError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(user).data)
