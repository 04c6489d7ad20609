"""Exhaustive search grouping for Group Mixer.

The pipeline enumerates every candidate partition, scores each one, keeps the
first lowest-scoring candidate, records its pairs in the caller's history and
returns one record per attendee.
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

from groupmixer.grouping.engine import find_best_grouping, group_attendees
from groupmixer.grouping.enumerator import (
    enumerate_partitions,
    max_group_count,
)
from groupmixer.grouping.formatter import assignments_to_groups, format_assignments
from groupmixer.grouping.history import iter_group_pairs, pair_key, record_partition
from groupmixer.grouping.scoring import (
    PartitionScore,
    evenness_score,
    pairing_score,
    score_partition,
)
from groupmixer.grouping.selector import select_best_partition

__all__ = [
    "group_attendees",
    "find_best_grouping",
    "enumerate_partitions",
    "max_group_count",
    "PartitionScore",
    "pairing_score",
    "evenness_score",
    "score_partition",
    "select_best_partition",
    "pair_key",
    "iter_group_pairs",
    "record_partition",
    "format_assignments",
    "assignments_to_groups",
]
