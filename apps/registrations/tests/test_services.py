"""
Unit tests for registration services.

Tests cover:
- Registration and group assignment
- Serialized assignment across threads
- Duplicate detection
- Population snapshot
- Group statistics and member listings
"""

import logging
import threading
from collections import Counter
from unittest.mock import patch

import pytest
from django.db import DatabaseError, connection

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
from apps.registrations.services import (
    ROSTER,
    RegistrantAttributes,
    get_population_snapshot,
    is_duplicate_registration,
    register_youth,
    get_group_statistics,
    get_group_members,
    clear_all_registrations,
    DuplicateRegistrationError,
    RegistrationError,
    UnknownGroupError,
)
from apps.registrations.services import registration as registration_service


def registration_kwargs(full_name, **overrides):
    """Keyword arguments for register_youth with sensible defaults."""
    kwargs = {
        'full_name': full_name,
        'gender': Gender.FEMALE,
        'marital_status': MaritalStatus.SINGLE,
        'employment_status': EmploymentStatus.STUDENT,
        'neighborhood': 'Cocody',
        'age_range': AgeRange.AGE_18_24,
        'contact1': '0701020304',
        'education_level': EducationLevel.LICENCE,
        'conversion_years': ConversionYears.YEARS_0_3,
        'water_baptism': True,
        'holy_spirit_baptism': False,
    }
    kwargs.update(overrides)
    return kwargs


# =============================================================================
# Registration Service Tests
# =============================================================================

@pytest.mark.django_db
class TestRegisterYouth:
    """Tests for register_youth service."""

    def test_first_registration_goes_to_first_group(self):
        registration = register_youth(**registration_kwargs('Grace Kouassi'))

        assert registration.assigned_group == YouthGroup.DISCIPLES
        assert YouthRegistration.objects.count() == 1

    def test_stores_profile_fields(self):
        registration = register_youth(**registration_kwargs(
            'Paul Mensah',
            gender=Gender.MALE,
            employment_status=EmploymentStatus.WORKER,
            work_type=WorkType.ENTREPRENEUR,
            message='Merci',
        ))

        registration.refresh_from_db()
        assert registration.work_type == WorkType.ENTREPRENEUR
        assert registration.message == 'Merci'
        assert registration.water_baptism is True
        assert registration.registered_at is not None

    def test_similar_registrants_are_spread_over_the_roster(self):
        """Identical profiles fill every group once before doubling up."""
        groups = [
            register_youth(**registration_kwargs(f'Youth {i}')).assigned_group
            for i in range(len(ROSTER) + 1)
        ]

        assert groups[:len(ROSTER)] == list(ROSTER)
        assert groups[-1] == YouthGroup.DISCIPLES

    def test_uses_existing_population(self, make_registration):
        for _ in range(3):
            make_registration(group=YouthGroup.DISCIPLES)

        registration = register_youth(**registration_kwargs('Ruth Yao'))

        assert registration.assigned_group == YouthGroup.LES_ELUS

    def test_duplicate_is_rejected(self):
        register_youth(**registration_kwargs('Grace Kouassi'))

        with pytest.raises(DuplicateRegistrationError):
            register_youth(**registration_kwargs('Grace Kouassi', contact1='0709999999'))

        assert YouthRegistration.objects.count() == 1

    def test_same_name_in_other_neighborhood_is_not_duplicate(self):
        register_youth(**registration_kwargs('Grace Kouassi'))

        registration = register_youth(**registration_kwargs('Grace Kouassi', neighborhood='Abobo'))

        assert registration.assigned_group == YouthGroup.LES_ELUS
        assert YouthRegistration.objects.count() == 2

    def test_storage_failure_raises_registration_error(self, caplog):
        with patch.object(
            YouthRegistration.objects, 'create', side_effect=DatabaseError('disk full')
        ):
            with caplog.at_level(logging.ERROR, logger='apps.registrations.services.registration'):
                with pytest.raises(RegistrationError, match='disk full'):
                    register_youth(**registration_kwargs('Grace Kouassi'))

        assert YouthRegistration.objects.count() == 0
        messages = [record.getMessage() for record in caplog.records]
        assert 'Failed to store registration' in messages
        assert not any('Grace Kouassi' in message for message in messages)

    def test_logs_assignment_without_personal_data(self, caplog):
        with caplog.at_level(logging.INFO, logger='apps.registrations.services.registration'):
            registration = register_youth(**registration_kwargs('Grace Kouassi'))

        messages = [record.getMessage() for record in caplog.records]
        assert f'Registered {registration.id} in group Disciples' in messages
        assert not any('Grace Kouassi' in message for message in messages)


@pytest.mark.django_db(transaction=True)
class TestRegisterYouthConcurrency:
    """Tests for serialized group assignment across threads."""

    def run_in_thread(self, full_name, results, errors):
        try:
            results[full_name] = register_youth(**registration_kwargs(full_name)).assigned_group
        except Exception as e:
            errors.append(e)
        finally:
            connection.close()

    def test_second_registration_waits_for_first(self):
        """A registration cannot read the population while another one is deciding."""
        entered = threading.Event()
        release = threading.Event()
        snapshot_calls = []
        results = {}
        errors = []

        def blocking_snapshot():
            snapshot_calls.append(threading.current_thread().name)
            if len(snapshot_calls) == 1:
                entered.set()
                release.wait(timeout=5)
            return get_population_snapshot()

        with patch.object(registration_service, 'get_population_snapshot', side_effect=blocking_snapshot):
            first = threading.Thread(target=self.run_in_thread, args=('Youth A', results, errors))
            first.start()
            assert entered.wait(timeout=5)

            second = threading.Thread(target=self.run_in_thread, args=('Youth B', results, errors))
            second.start()
            second.join(timeout=0.3)

            assert second.is_alive()
            assert len(snapshot_calls) == 1

            release.set()
            first.join(timeout=5)
            second.join(timeout=5)

        assert errors == []
        assert results == {
            'Youth A': YouthGroup.DISCIPLES,
            'Youth B': YouthGroup.LES_ELUS,
        }

    def test_parallel_identical_registrants_stay_balanced(self):
        results = {}
        errors = []
        threads = [
            threading.Thread(target=self.run_in_thread, args=(f'Youth {i}', results, errors))
            for i in range(2 * len(ROSTER))
        ]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert errors == []
        counts = Counter(YouthRegistration.objects.values_list('assigned_group', flat=True))
        assert counts == {group: 2 for group in ROSTER}


@pytest.mark.django_db
class TestIsDuplicateRegistration:
    """Tests for is_duplicate_registration service."""

    def test_matches_on_all_four_fields(self, make_registration):
        make_registration(full_name='Jean Koné', neighborhood='Marcory')

        assert is_duplicate_registration(
            full_name='Jean Koné',
            employment_status=EmploymentStatus.STUDENT,
            marital_status=MaritalStatus.SINGLE,
            neighborhood='Marcory',
        )

    def test_different_marital_status_is_not_duplicate(self, make_registration):
        make_registration(full_name='Jean Koné', neighborhood='Marcory')

        assert not is_duplicate_registration(
            full_name='Jean Koné',
            employment_status=EmploymentStatus.STUDENT,
            marital_status=MaritalStatus.MARRIED,
            neighborhood='Marcory',
        )


@pytest.mark.django_db
class TestPopulationSnapshot:
    """Tests for get_population_snapshot service."""

    def test_empty(self):
        assert get_population_snapshot() == []

    def test_returns_group_and_attributes(self, make_registration):
        make_registration(
            group=YouthGroup.FLAMBEAUX,
            marital_status=MaritalStatus.MARRIED,
            employment_status=EmploymentStatus.WORKER,
            gender=Gender.MALE,
        )

        assert get_population_snapshot() == [(
            YouthGroup.FLAMBEAUX,
            RegistrantAttributes(
                marital_status=MaritalStatus.MARRIED,
                employment_status=EmploymentStatus.WORKER,
                gender=Gender.MALE,
            ),
        )]

    def test_skips_unassigned_rows(self, make_registration):
        make_registration(group='')
        make_registration(group=YouthGroup.DISCIPLES)

        assert len(get_population_snapshot()) == 1


# =============================================================================
# Group Statistics Service Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupStatistics:
    """Tests for get_group_statistics service."""

    def test_empty_roster(self):
        stats = get_group_statistics()

        assert stats['total_registrations'] == 0
        assert [group['name'] for group in stats['groups']] == list(ROSTER)
        assert all(group['total'] == 0 for group in stats['groups'])

    def test_counts_per_group(self, make_registration):
        make_registration(group=YouthGroup.DISCIPLES)
        make_registration(
            group=YouthGroup.DISCIPLES,
            marital_status=MaritalStatus.MARRIED,
            employment_status=EmploymentStatus.WORKER,
            gender=Gender.MALE,
        )
        make_registration(group=YouthGroup.SACERDOCE_ROYAL, employment_status=EmploymentStatus.UNEMPLOYED)

        stats = get_group_statistics()
        by_name = {group['name']: group for group in stats['groups']}

        assert stats['total_registrations'] == 3
        assert by_name[YouthGroup.DISCIPLES] == {
            'name': YouthGroup.DISCIPLES,
            'total': 2,
            'married_count': 1,
            'other_marital_count': 1,
            'worker_count': 1,
            'student_count': 1,
            'unemployed_count': 0,
            'male_count': 1,
            'female_count': 1,
        }
        assert by_name[YouthGroup.SACERDOCE_ROYAL]['unemployed_count'] == 1

    def test_unknown_groups_are_left_out(self, make_registration):
        make_registration(group='Ghost Group')
        make_registration(group=YouthGroup.DISCIPLES)

        stats = get_group_statistics()

        assert stats['total_registrations'] == 1
        assert 'Ghost Group' not in [group['name'] for group in stats['groups']]


@pytest.mark.django_db
class TestGroupMembers:
    """Tests for get_group_members service."""

    def test_lists_members_ordered_by_name(self, make_registration):
        make_registration(group=YouthGroup.FLAMBEAUX, full_name='Zoé Bamba')
        make_registration(group=YouthGroup.FLAMBEAUX, full_name='Ange Diallo')
        make_registration(group=YouthGroup.DISCIPLES, full_name='Marc Traoré')

        members = get_group_members(group_name=YouthGroup.FLAMBEAUX)

        assert [m.full_name for m in members] == ['Ange Diallo', 'Zoé Bamba']

    def test_empty_group(self):
        assert list(get_group_members(group_name=YouthGroup.FLAMBEAUX)) == []

    def test_unknown_group_raises(self):
        with pytest.raises(UnknownGroupError):
            get_group_members(group_name='Ghost Group')


@pytest.mark.django_db
class TestClearAllRegistrations:
    """Tests for clear_all_registrations service."""

    def test_deletes_everything(self, make_registration):
        make_registration()
        make_registration(group=YouthGroup.LES_ELUS)

        assert clear_all_registrations() == 2
        assert YouthRegistration.objects.count() == 0

    def test_next_registration_starts_over(self, make_registration):
        make_registration(group=YouthGroup.DISCIPLES)
        clear_all_registrations()

        registration = register_youth(**registration_kwargs('Grace Kouassi'))

        assert registration.assigned_group == YouthGroup.DISCIPLES
