"""
Group balancing service.

Picks the youth group a new registrant should join so that groups stay
comparable in size and in their mix of marital status, employment
situation and gender.

The balancer is pure: it reads a population snapshot supplied by the
caller and returns a group name. Loading the snapshot and persisting the
decision are the registration service's job.

Example:
    >>> candidate = RegistrantAttributes(
    ...     marital_status='single', employment_status='student', gender='female'
    ... )
    >>> assign_group([], candidate)
    'Disciples'
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Iterable, Sequence, Tuple

from apps.registrations.models import (
    YouthGroup,
    MaritalStatus,
    EmploymentStatus,
    Gender,
)

logger = logging.getLogger(__name__)

ROSTER: Tuple[str, ...] = tuple(YouthGroup.values)

# Score weights. Lower score means a more eligible group.
TOTAL_WEIGHT = 10
MARRIED_WEIGHT = 5
OTHER_MARITAL_WEIGHT = 3
EMPLOYMENT_WEIGHT = 4
GENDER_WEIGHT = 3


@dataclass(frozen=True)
class RegistrantAttributes:
    """The part of a registrant's profile that the balancer looks at."""
    marital_status: str
    employment_status: str
    gender: str

    @property
    def is_married(self) -> bool:
        return self.marital_status == MaritalStatus.MARRIED


# (group name, attributes) of an already assigned registrant
PopulationEntry = Tuple[str, RegistrantAttributes]


@dataclass
class GroupAggregate:
    """Headcounts of one group, broken down by balancing dimension."""
    total: int = 0
    married_count: int = 0
    other_marital_count: int = 0
    worker_count: int = 0
    student_count: int = 0
    unemployed_count: int = 0
    male_count: int = 0
    female_count: int = 0

    def add(self, attributes: RegistrantAttributes) -> None:
        self.total += 1

        if attributes.is_married:
            self.married_count += 1
        else:
            self.other_marital_count += 1

        if attributes.employment_status == EmploymentStatus.WORKER:
            self.worker_count += 1
        elif attributes.employment_status == EmploymentStatus.STUDENT:
            self.student_count += 1
        else:
            self.unemployed_count += 1

        if attributes.gender == Gender.MALE:
            self.male_count += 1
        else:
            self.female_count += 1

    def as_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def compute_aggregates(
    population: Iterable[PopulationEntry],
    *,
    roster: Sequence[str] = ROSTER
) -> Dict[str, GroupAggregate]:
    """
    Fold a population snapshot into one aggregate per roster group.

    Every roster group is present in the result, in roster order, even
    when it has no members. Entries whose group is not in the roster are
    skipped and logged.

    Args:
        population: (group name, attributes) pairs of assigned registrants
        roster: Ordered group names

    Returns:
        Dict mapping group name to its GroupAggregate
    """
    aggregates = {group: GroupAggregate() for group in roster}
    ignored = 0

    for group_name, attributes in population:
        aggregate = aggregates.get(group_name)
        if aggregate is None:
            ignored += 1
            continue
        aggregate.add(attributes)

    if ignored:
        logger.warning(
            "Ignored %d registrant(s) assigned to groups outside the roster",
            ignored,
        )

    return aggregates


def score_group(aggregate: GroupAggregate, candidate: RegistrantAttributes) -> int:
    """
    Score how loaded a group is for this candidate. Lower is better.

    Headcount dominates; members sharing the candidate's marital status,
    employment situation and gender add smaller penalties.
    """
    score = TOTAL_WEIGHT * aggregate.total

    if candidate.is_married:
        score += MARRIED_WEIGHT * aggregate.married_count
    else:
        score += OTHER_MARITAL_WEIGHT * aggregate.other_marital_count

    if candidate.employment_status == EmploymentStatus.WORKER:
        score += EMPLOYMENT_WEIGHT * aggregate.worker_count
    elif candidate.employment_status == EmploymentStatus.STUDENT:
        score += EMPLOYMENT_WEIGHT * aggregate.student_count
    else:
        score += EMPLOYMENT_WEIGHT * aggregate.unemployed_count

    if candidate.gender == Gender.MALE:
        score += GENDER_WEIGHT * aggregate.male_count
    else:
        score += GENDER_WEIGHT * aggregate.female_count

    return score


def score_groups(
    population: Iterable[PopulationEntry],
    candidate: RegistrantAttributes,
    *,
    roster: Sequence[str] = ROSTER
) -> Dict[str, int]:
    """Score every roster group against the candidate, in roster order."""
    aggregates = compute_aggregates(population, roster=roster)
    return {
        group: score_group(aggregate, candidate)
        for group, aggregate in aggregates.items()
    }


def assign_group(
    population: Iterable[PopulationEntry],
    candidate: RegistrantAttributes,
    *,
    roster: Sequence[str] = ROSTER
) -> str:
    """
    Choose the group a new registrant should join.

    The candidate must not be part of the population. Ties go to the
    group declared first in the roster.

    Args:
        population: (group name, attributes) pairs of assigned registrants
        candidate: Attributes of the registrant being placed
        roster: Ordered group names

    Returns:
        Name of the lowest-scoring group
    """
    scores = score_groups(population, candidate, roster=roster)

    # sorted() is stable, so equal scores keep roster order
    ranked = sorted(scores.items(), key=lambda item: item[1])

    return ranked[0][0]
