"""Conversion of a chosen partition into output records."""

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

from typing import Dict, List, Sequence

from groupmixer.models.group_assignment import GroupAssignment
from groupmixer.type_hints import Attendee, Partition


def format_assignments(partition: Partition) -> List[GroupAssignment]:
    """Flatten a partition into one record per attendee, groups numbered from 1."""
    return [
        GroupAssignment(name=attendee, group=index)
        for index, group in enumerate(partition, start=1)
        for attendee in group
    ]


def assignments_to_groups(
    assignments: Sequence[GroupAssignment],
) -> List[List[Attendee]]:
    """Rebuild the group lists from flat records, ordered by group number."""
    groups: Dict[int, List[Attendee]] = {}
    for assignment in assignments:
        groups.setdefault(assignment.group, []).append(assignment.name)
    return [groups[number] for number in sorted(groups)]
