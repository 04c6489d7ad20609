"""Weekly grouping entry points.

Ties the enumerate, score, select, record and format steps together into the
call that callers use to group one week's roster.
"""

# Group Mixer
# Copyright (C) 2025  Group Mixer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import List, Mapping, Optional, Tuple

from groupmixer.constants import DEFAULT_MAX_GROUP_SIZE, LARGE_ROSTER_WARNING_THRESHOLD
from groupmixer.grouping.enumerator import enumerate_partitions
from groupmixer.grouping.formatter import format_assignments
from groupmixer.grouping.history import record_partition
from groupmixer.grouping.scoring import PartitionScore
from groupmixer.grouping.selector import select_best_partition
from groupmixer.models.group_assignment import GroupAssignment
from groupmixer.type_hints import PairCounts, PairKey, Partition, Roster
from groupmixer.utils import setup_logger
from groupmixer.utils.validation import (
    validate_max_group_size_strict,
    validate_roster_strict,
)

logger = setup_logger(__name__)


def find_best_grouping(
    roster: Optional[Roster],
    pair_history: Optional[Mapping[PairKey, int]] = None,
    max_group_size: int = DEFAULT_MAX_GROUP_SIZE,
    large_roster_threshold: int = LARGE_ROSTER_WARNING_THRESHOLD,
) -> Optional[Tuple[Partition, PartitionScore]]:
    """Search every candidate grouping and return the best one.

    Nothing is mutated; use :func:`group_attendees` to also record the
    result in the history.

    Args:
        roster: Attendee names in order; None counts as empty
        pair_history: Pair counts from earlier weeks; None counts as empty
        max_group_size: Largest allowed group
        large_roster_threshold: Roster size above which a slow-search warning is logged

    Returns:
        (partition, score) for the winning grouping, or None for an empty roster

    Raises:
        InvalidGroupSizeException: If max_group_size is not a positive integer
        InvalidRosterException: If the roster is not a sequence of names
        DuplicateAttendeeException: If a name appears twice in the roster
    """
    max_group_size = validate_max_group_size_strict(max_group_size)
    attendees = validate_roster_strict(roster)

    if not attendees:
        logger.info("Empty roster, nothing to group")
        return None

    if pair_history is None:
        pair_history = {}

    if len(attendees) > large_roster_threshold:
        logger.warning(
            "Roster of %d attendees exceeds %d; exhaustive search may take a long time",
            len(attendees),
            large_roster_threshold,
        )

    logger.info(
        "Grouping %d attendees with max group size %d",
        len(attendees),
        max_group_size,
    )

    return select_best_partition(
        enumerate_partitions(attendees, max_group_size),
        pair_history,
        len(attendees),
    )


def group_attendees(
    roster: Optional[Roster],
    pair_history: Optional[PairCounts] = None,
    max_group_size: int = DEFAULT_MAX_GROUP_SIZE,
    large_roster_threshold: int = LARGE_ROSTER_WARNING_THRESHOLD,
) -> List[GroupAssignment]:
    """
    Group this week's attendees and record the new pairings.

    The lowest-scoring grouping is chosen, every pair placed together is
    added to ``pair_history`` in place, and the grouping is returned as one
    record per attendee. An empty roster returns ``[]`` and leaves the
    history alone. Invalid arguments raise before the history is touched.

    Parameters
    ----------
    roster : sequence of str or None
        Attendees for this week, in order.
    pair_history : mutable mapping of str to int or None
        Caller-owned pair counts, updated in place. If None, a fresh empty
        mapping is used for this call only.
    max_group_size : int
        Largest allowed group.
    large_roster_threshold : int
        Roster size above which a slow-search warning is logged.

    Returns
    -------
    list of GroupAssignment
        One record per attendee, in group order.
    """
    if pair_history is None:
        pair_history = {}

    best = find_best_grouping(
        roster, pair_history, max_group_size, large_roster_threshold
    )
    if best is None:
        return []

    partition, score = best
    logger.info(
        "Selected %d groups (pairing score %d, evenness score %.2f)",
        len(partition),
        score.pairing_score,
        score.evenness_score,
    )

    record_partition(partition, pair_history)
    return format_assignments(partition)
