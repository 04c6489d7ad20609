"""Selection of the lowest-scoring partition."""

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

from typing import Iterable, Mapping, Optional, Tuple

from groupmixer.grouping.scoring import PartitionScore, score_partition
from groupmixer.type_hints import PairKey, Partition
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


def select_best_partition(
    partitions: Iterable[Partition],
    pair_history: Mapping[PairKey, int],
    num_attendees: int,
) -> Optional[Tuple[Partition, PartitionScore]]:
    """
    Return the first partition with the lowest total score.

    Candidates are scanned in the order given; a later candidate only wins
    on a strictly lower total, so ties go to the earliest partition.

    Parameters
    ----------
    partitions : iterable of Partition
        Candidates in enumeration order.
    pair_history : mapping of str to int
        Read-only pair counts.
    num_attendees : int
        Size of the roster the partitions cover.

    Returns
    -------
    tuple of (Partition, PartitionScore) or None
        The winner and its score, or None if there were no candidates.
    """
    best: Optional[Partition] = None
    best_score: Optional[PartitionScore] = None
    scanned = 0

    for partition in partitions:
        scanned += 1
        score = score_partition(partition, pair_history, num_attendees)
        if best_score is None or score.total_score < best_score.total_score:
            best = partition
            best_score = score

    logger.debug("Scanned %d candidate partitions", scanned)

    if best is None:
        return None
    return best, best_score
