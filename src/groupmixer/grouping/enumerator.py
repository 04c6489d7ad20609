"""Exhaustive enumeration of roster partitions."""

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

import math
from typing import Iterator

from groupmixer.type_hints import Partition, Roster


def max_group_count(num_attendees: int, max_group_size: int) -> int:
    """Upper bound on the number of groups a candidate partition may have."""
    return math.ceil(num_attendees / max_group_size)


def enumerate_partitions(roster: Roster, max_group_size: int) -> Iterator[Partition]:
    """
    Yield every partition reachable by the group-building decision tree.

    Attendees are placed one at a time in roster order. Each attendee is
    first tried in every existing group with room left (in group order), and
    then, while fewer than ``ceil(n / max_group_size)`` groups exist, in a new
    group of its own. Partitions come out depth-first in that order, which
    fixes how ties are broken later on.

    Parameters
    ----------
    roster : sequence of str
        Attendees in the order they should be placed.
    max_group_size : int
        Largest allowed group. Must be a positive integer.

    Yields
    ------
    tuple of tuple of str
        A complete, disjoint partition of ``roster``.
    """
    attendees = tuple(roster)
    if not attendees:
        return iter(())
    group_limit = max_group_count(len(attendees), max_group_size)

    def _extend(index: int, groups: Partition) -> Iterator[Partition]:
        if index == len(attendees):
            yield groups
            return

        attendee = attendees[index]

        for i, group in enumerate(groups):
            if len(group) < max_group_size:
                # Tuples are rebuilt per branch; sibling branches share nothing mutable
                branch = groups[:i] + (group + (attendee,),) + groups[i + 1 :]
                yield from _extend(index + 1, branch)

        if len(groups) < group_limit:
            yield from _extend(index + 1, groups + ((attendee,),))

    return _extend(0, ())
