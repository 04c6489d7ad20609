"""Scoring of candidate partitions.

Two independent measures are combined:

* the pairing score counts how often co-grouped attendees have met before;
* the evenness score measures how far group sizes drift from the ideal
  ``num_attendees / num_groups``.

The total weights evenness by ``EVENNESS_WEIGHT`` so that balanced group sizes
take priority over avoiding repeat pairings.
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

from dataclasses import dataclass
from typing import Dict, Mapping, Sequence

from groupmixer.constants import EVENNESS_WEIGHT
from groupmixer.grouping.history import iter_group_pairs, pair_key
from groupmixer.type_hints import Attendee, PairKey, Partition


@dataclass(frozen=True)
class PartitionScore:
    """Score breakdown for one partition (lower is better)."""

    pairing_score: int = 0
    evenness_score: float = 0.0
    total_score: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "pairing_score": self.pairing_score,
            "evenness_score": self.evenness_score,
            "total_score": self.total_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "PartitionScore":
        """Deserialize a score from dictionary."""
        return cls(
            pairing_score=int(data.get("pairing_score", 0)),
            evenness_score=float(data.get("evenness_score", 0.0)),
            total_score=float(data.get("total_score", 0.0)),
        )


def group_pairing_score(
    group: Sequence[Attendee], pair_history: Mapping[PairKey, int]
) -> int:
    """Sum of past meetings for every pair inside one group."""
    return sum(
        pair_history.get(pair_key(first, second), 0)
        for first, second in iter_group_pairs(group)
    )


def pairing_score(partition: Partition, pair_history: Mapping[PairKey, int]) -> int:
    """Sum of past meetings across every group of the partition."""
    return sum(group_pairing_score(group, pair_history) for group in partition)


def evenness_score(partition: Partition, num_attendees: int) -> float:
    """Total absolute deviation of group sizes from the ideal average size."""
    if not partition:
        return 0.0
    average_size = num_attendees / len(partition)
    score = 0.0
    for group in partition:
        score += abs(len(group) - average_size)
    return score


def score_partition(
    partition: Partition, pair_history: Mapping[PairKey, int], num_attendees: int
) -> PartitionScore:
    """Compute the full score breakdown of a partition.

    Args:
        partition: Candidate grouping
        pair_history: Read-only pair counts
        num_attendees: Size of the roster being grouped

    Returns:
        PartitionScore with pairing, evenness and weighted total
    """
    pairing = pairing_score(partition, pair_history)
    evenness = evenness_score(partition, num_attendees)
    return PartitionScore(
        pairing_score=pairing,
        evenness_score=evenness,
        total_score=pairing + evenness * EVENNESS_WEIGHT,
    )
