"""
Registration service.

Registers a youth, places them in a group and stores the result.
Assignment decisions are serialized so that two concurrent registrations
never read the same population snapshot.
"""

import logging
import threading
from typing import List

from django.db import transaction, DatabaseError

from apps.registrations.models import YouthRegistration

from .exceptions import DuplicateRegistrationError, RegistrationError
from .group_balancing import (
    PopulationEntry,
    RegistrantAttributes,
    assign_group,
)

logger = logging.getLogger(__name__)

# Held from snapshot read until the new registration is committed
_assignment_lock = threading.Lock()


def get_population_snapshot() -> List[PopulationEntry]:
    """
    Load every assigned registrant as balancer input.

    Returns:
        List of (group name, RegistrantAttributes) pairs
    """
    rows = (
        YouthRegistration.objects
        .exclude(assigned_group='')
        .values_list('assigned_group', 'marital_status', 'employment_status', 'gender')
    )
    return [
        (
            group,
            RegistrantAttributes(
                marital_status=marital_status,
                employment_status=employment_status,
                gender=gender,
            ),
        )
        for group, marital_status, employment_status, gender in rows
    ]


def is_duplicate_registration(
    *,
    full_name: str,
    employment_status: str,
    marital_status: str,
    neighborhood: str
) -> bool:
    """Check whether someone with the same characteristics is already registered."""
    return YouthRegistration.objects.filter(
        full_name=full_name,
        employment_status=employment_status,
        marital_status=marital_status,
        neighborhood=neighborhood,
    ).exists()


def register_youth(
    *,
    full_name: str,
    gender: str,
    marital_status: str,
    employment_status: str,
    neighborhood: str,
    **profile
) -> YouthRegistration:
    """
    Register a youth and assign them to the best balanced group.

    This operation:
    1. Rejects duplicates (same name, employment, marital status, neighborhood)
    2. Reads the current population snapshot
    3. Runs the group balancer
    4. Stores the registration with the chosen group

    Steps 2-4 run under a lock and inside one transaction.

    Args:
        full_name: Registrant's full name
        gender: Gender value
        marital_status: Marital status value
        employment_status: Employment status value
        neighborhood: Neighborhood of residence
        **profile: Remaining YouthRegistration fields

    Returns:
        Created YouthRegistration instance

    Raises:
        DuplicateRegistrationError: If the person is already registered
        RegistrationError: If the registration cannot be stored
    """
    candidate = RegistrantAttributes(
        marital_status=marital_status,
        employment_status=employment_status,
        gender=gender,
    )

    with _assignment_lock:
        if is_duplicate_registration(
            full_name=full_name,
            employment_status=employment_status,
            marital_status=marital_status,
            neighborhood=neighborhood,
        ):
            raise DuplicateRegistrationError(
                "A person with these characteristics is already registered."
            )

        try:
            with transaction.atomic():
                group = assign_group(get_population_snapshot(), candidate)

                registration = YouthRegistration.objects.create(
                    full_name=full_name,
                    gender=gender,
                    marital_status=marital_status,
                    employment_status=employment_status,
                    neighborhood=neighborhood,
                    assigned_group=group,
                    **profile
                )
        except DatabaseError as e:
            logger.exception("Failed to store registration")
            raise RegistrationError(f"Registration failed: {str(e)}")

    logger.info("Registered %s in group %s", registration.id, group)

    return registration
