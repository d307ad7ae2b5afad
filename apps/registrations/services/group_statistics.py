"""Group statistics service - dashboard aggregates and member listings."""

import logging

from django.db import transaction
from django.db.models import QuerySet

from apps.registrations.models import YouthRegistration

from .exceptions import UnknownGroupError
from .group_balancing import ROSTER, compute_aggregates
from .registration import get_population_snapshot

logger = logging.getLogger(__name__)


def get_group_statistics() -> dict:
    """
    Calculate per-group headcounts for the admin dashboard.

    Uses the same aggregation as the group balancer, so the numbers shown
    are the numbers the next assignment will be decided on.

    Returns:
        Dictionary with:
        - total_registrations: int - Registrants across all roster groups
        - groups: list - One entry per roster group, in roster order,
          with the group name and its counts

    Example:
        >>> stats = get_group_statistics()
        >>> stats['groups'][0]['name']
        'Disciples'
    """
    aggregates = compute_aggregates(get_population_snapshot())

    groups = [
        {'name': name, **aggregate.as_dict()}
        for name, aggregate in aggregates.items()
    ]

    return {
        'total_registrations': sum(group['total'] for group in groups),
        'groups': groups,
    }


def get_group_members(*, group_name: str) -> QuerySet[YouthRegistration]:
    """
    Get all registrants of a group ordered by name.

    Args:
        group_name: Roster group name

    Returns:
        QuerySet of YouthRegistration instances

    Raises:
        UnknownGroupError: If group_name is not in the roster
    """
    if group_name not in ROSTER:
        raise UnknownGroupError(f"Unknown group: {group_name}")

    return (
        YouthRegistration.objects
        .filter(assigned_group=group_name)
        .order_by('full_name')
    )


@transaction.atomic
def clear_all_registrations() -> int:
    """
    Delete every registration.

    Returns:
        Number of registrations deleted
    """
    deleted, _ = YouthRegistration.objects.all().delete()

    logger.warning("Cleared all registrations (%d deleted)", deleted)

    return deleted
