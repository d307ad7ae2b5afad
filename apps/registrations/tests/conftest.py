import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, StaffRole
from apps.registrations.models import (
    YouthRegistration,
    YouthGroup,
    Gender,
    AgeRange,
    MaritalStatus,
    EmploymentStatus,
    WorkType,
    EducationLevel,
    ConversionYears,
)
from apps.registrations.services import RegistrantAttributes


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def bureau_admin(db):
    """Create and return a bureau admin."""
    return User.objects.create_user(
        email='bureau@example.com',
        password='TestPass123!',
        display_name='Bureau Admin',
        role=StaffRole.ADMIN,
    )


@pytest.fixture
def disciples_leader(db):
    """Create and return the leader of the Disciples group."""
    return User.objects.create_user(
        email='disciples@example.com',
        password='TestPass123!',
        display_name='Disciples Leader',
        role=StaffRole.GROUP_LEADER,
        group_name=YouthGroup.DISCIPLES,
    )


@pytest.fixture
def admin_client(api_client, bureau_admin):
    """Return API client authenticated as bureau admin."""
    refresh = RefreshToken.for_user(bureau_admin)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def leader_client(api_client, disciples_leader):
    """Return API client authenticated as the Disciples leader."""
    refresh = RefreshToken.for_user(disciples_leader)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def registration_payload():
    """Valid payload of the public registration form."""
    return {
        'full_name': 'Grace Kouassi',
        'gender': Gender.FEMALE,
        'age_range': AgeRange.AGE_18_24,
        'neighborhood': 'Cocody',
        'contact1': '0701020304',
        'marital_status': MaritalStatus.SINGLE,
        'employment_status': EmploymentStatus.STUDENT,
        'education_level': EducationLevel.LICENCE,
        'conversion_years': ConversionYears.YEARS_4_7,
        'water_baptism': True,
        'holy_spirit_baptism': False,
        'message': 'Heureuse de rejoindre la jeunesse',
    }


@pytest.fixture
def make_registration(db):
    """Factory storing a registration directly in a given group."""
    counter = {'value': 0}

    def _make(
        group=YouthGroup.DISCIPLES,
        marital_status=MaritalStatus.SINGLE,
        employment_status=EmploymentStatus.STUDENT,
        gender=Gender.FEMALE,
        **extra
    ):
        counter['value'] += 1
        fields = {
            'full_name': f'Member {counter["value"]}',
            'age_range': AgeRange.AGE_18_24,
            'neighborhood': 'Yopougon',
            'contact1': f'0700000{counter["value"]:03d}',
            'education_level': EducationLevel.BAC,
            'conversion_years': ConversionYears.YEARS_0_3,
            'work_type': WorkType.PRIVATE if employment_status == EmploymentStatus.WORKER else '',
        }
        fields.update(extra)
        return YouthRegistration.objects.create(
            assigned_group=group,
            marital_status=marital_status,
            employment_status=employment_status,
            gender=gender,
            **fields
        )

    return _make


@pytest.fixture
def single_student_woman():
    """Balancer attributes of an unmarried female student."""
    return RegistrantAttributes(
        marital_status=MaritalStatus.SINGLE,
        employment_status=EmploymentStatus.STUDENT,
        gender=Gender.FEMALE,
    )


@pytest.fixture
def married_working_man():
    """Balancer attributes of a married male worker."""
    return RegistrantAttributes(
        marital_status=MaritalStatus.MARRIED,
        employment_status=EmploymentStatus.WORKER,
        gender=Gender.MALE,
    )
