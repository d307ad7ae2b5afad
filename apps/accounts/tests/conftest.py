import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, StaffRole
from apps.registrations.models import YouthGroup


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create and return a bureau admin."""
    return User.objects.create_user(
        email='bureau@example.com',
        password='TestPass123!',
        display_name='Bureau Admin',
        role=StaffRole.ADMIN,
    )


@pytest.fixture
def leader(db):
    """Create and return the leader of the Flambeaux group."""
    return User.objects.create_user(
        email='flambeaux@example.com',
        password='TestPass123!',
        display_name='Flambeaux Leader',
        role=StaffRole.GROUP_LEADER,
        group_name=YouthGroup.FLAMBEAUX,
    )


@pytest.fixture
def leader_inactive(db):
    """Create and return a deactivated group leader."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        role=StaffRole.GROUP_LEADER,
        group_name=YouthGroup.DISCIPLES,
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, leader):
    """Return an API client authenticated as the group leader using JWT."""
    refresh = RefreshToken.for_user(leader)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
