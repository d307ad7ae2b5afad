"""
Registrations app services layer.

Services contain business logic and orchestrate operations across models.
The group balancer is pure; the other services load its input from the
database and persist its decisions.
"""

from .exceptions import (
    RegistrationsServiceError,
    DuplicateRegistrationError,
    UnknownGroupError,
    RegistrationError,
)

from .group_balancing import (
    ROSTER,
    RegistrantAttributes,
    GroupAggregate,
    compute_aggregates,
    score_group,
    score_groups,
    assign_group,
)

from .registration import (
    get_population_snapshot,
    is_duplicate_registration,
    register_youth,
)

from .group_statistics import (
    get_group_statistics,
    get_group_members,
    clear_all_registrations,
)


__all__ = [
    # Exceptions
    'RegistrationsServiceError',
    'DuplicateRegistrationError',
    'UnknownGroupError',
    'RegistrationError',

    # Group balancing
    'ROSTER',
    'RegistrantAttributes',
    'GroupAggregate',
    'compute_aggregates',
    'score_group',
    'score_groups',
    'assign_group',

    # Registration
    'get_population_snapshot',
    'is_duplicate_registration',
    'register_youth',

    # Group statistics
    'get_group_statistics',
    'get_group_members',
    'clear_all_registrations',
]
