"""Data model for a single attendee's group assignment."""

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
from typing import Any, Dict


@dataclass(frozen=True)
class GroupAssignment:
    """
    One output record: an attendee and the group they were placed in.

    Attributes
    ----------
    name : str
        Attendee identifier.
    group : int
        1-based index of the attendee's group in the chosen partition.
    """

    name: str
    group: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize assignment to dictionary."""
        return {"name": self.name, "group": self.group}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupAssignment":
        """Deserialize assignment from dictionary."""
        return cls(name=str(data["name"]), group=int(data["group"]))
