from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsBureauAdmin, CanViewGroup

from .models import YouthRegistration
from .serializers import (
    YouthRegistrationSerializer,
    YouthRegistrationCreateSerializer,
    RegistrationResultSerializer,
    GroupStatisticsOverviewSerializer,
    GroupMemberSerializer,
)

from apps.registrations.services import (
    register_youth,
    get_group_statistics,
    get_group_members,
    clear_all_registrations,
    # Exceptions
    DuplicateRegistrationError,
    RegistrationError,
    UnknownGroupError,
)


class RegistrationPagination(PageNumberPagination):
    """Custom pagination for registrations."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class YouthRegistrationViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for youth registrations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    create: Register a youth (public) and assign a group
    list: List all registrations (admin only)
    retrieve: Get one registration (admin only)
    groups: Per-group statistics (admin only)
    clear: Delete every registration (admin only)
    """

    queryset = YouthRegistration.objects.all()
    serializer_class = YouthRegistrationSerializer
    permission_classes = [IsBureauAdmin]
    pagination_class = RegistrationPagination

    def get_serializer_class(self):
        """Use a dedicated input serializer for registration."""
        if self.action == 'create':
            return YouthRegistrationCreateSerializer
        return YouthRegistrationSerializer

    def get_permissions(self):
        """Registration is open to everyone, the rest is admin only."""
        if self.action == 'create':
            return [AllowAny()]
        return [IsBureauAdmin()]

    @extend_schema(
        request=YouthRegistrationCreateSerializer,
        responses={201: RegistrationResultSerializer},
    )
    def create(self, request, *args, **kwargs):
        """Register a youth and assign them to a group."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            registration = register_youth(**serializer.validated_data)
        except (DuplicateRegistrationError, RegistrationError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        group = registration.assigned_group
        return Response({
            'message': f'Registration successful! You have been assigned to the group "{group}".',
            'group': group,
            'registration': YouthRegistrationSerializer(registration).data,
        }, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: GroupStatisticsOverviewSerializer})
    @action(detail=False, methods=['get'])
    def groups(self, request):
        """Get headcounts for every group of the roster."""
        stats = get_group_statistics()
        serializer = GroupStatisticsOverviewSerializer(stats)
        return Response(serializer.data)

    @extend_schema(responses={200: None})
    @action(detail=False, methods=['delete'])
    def clear(self, request):
        """Delete all registrations (admin only)."""
        deleted = clear_all_registrations()
        return Response({
            'message': 'All registrations deleted',
            'deleted': deleted,
        })


@extend_schema(
    responses={200: GroupMemberSerializer(many=True)},
    description="Get the members of one group. Group leaders only see their own group.",
    tags=['registrations'],
)
@api_view(['GET'])
@permission_classes([CanViewGroup])
def group_members(request, group_name):
    """Get all members of a group."""
    try:
        members = get_group_members(group_name=group_name)
    except UnknownGroupError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    serializer = GroupMemberSerializer(members, many=True)
    return Response(serializer.data)
