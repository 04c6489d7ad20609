"""Pair keys and pair history updates."""

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

from itertools import combinations
from typing import Iterator, Sequence, Tuple

from groupmixer.constants import PAIR_KEY_SEPARATOR
from groupmixer.type_hints import Attendee, PairCounts, PairKey, Partition
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


def pair_key(first: Attendee, second: Attendee) -> PairKey:
    """Build the order-independent history key for two attendees."""
    return PAIR_KEY_SEPARATOR.join(sorted((first, second)))


def iter_group_pairs(group: Sequence[Attendee]) -> Iterator[Tuple[Attendee, Attendee]]:
    """Yield each unordered pair of distinct positions in a group once."""
    return combinations(group, 2)


def record_partition(partition: Partition, pair_history: PairCounts) -> int:
    """
    Add one meeting to the history for every pair sharing a group.

    The history is updated in place; pairs seen for the first time start at 1.

    Returns
    -------
    int
        Number of pair entries that were incremented.
    """
    updated = 0
    for group in partition:
        for first, second in iter_group_pairs(group):
            key = pair_key(first, second)
            pair_history[key] = pair_history.get(key, 0) + 1
            updated += 1
    logger.debug("Recorded %d pairings across %d groups", updated, len(partition))
    return updated
