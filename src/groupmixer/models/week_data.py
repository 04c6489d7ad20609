"""Data model for one week of grouping."""

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

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from groupmixer.exceptions import InvalidWeekDataException
from groupmixer.grouping.scoring import PartitionScore
from groupmixer.models.group_assignment import GroupAssignment


@dataclass
class WeekData:
    """Container for all data related to a single week.

    Attributes
    ----------
    week_number : int
        Week number (1-indexed).
    session_date : date or None
        Date the groups meet, if known.
    roster : list of str
        Attendees present that week, in input order.
    assignments : list of GroupAssignment
        Chosen grouping, one record per attendee.
    score : PartitionScore
        Score of the chosen grouping against the history before that week.
    """

    week_number: int
    session_date: Optional[date] = None
    roster: List[str] = field(default_factory=list)
    assignments: List[GroupAssignment] = field(default_factory=list)
    score: PartitionScore = field(default_factory=PartitionScore)

    @property
    def groups(self) -> List[List[str]]:
        """Chosen groups as lists of names, in group order."""
        # Imported here: the formatter imports this package while it loads
        from groupmixer.grouping.formatter import assignments_to_groups

        return assignments_to_groups(self.assignments)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize week data to dictionary."""
        return {
            "week_number": self.week_number,
            "session_date": (
                self.session_date.isoformat() if self.session_date else None
            ),
            "roster": list(self.roster),
            "assignments": [a.to_dict() for a in self.assignments],
            "score": self.score.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeekData":
        """Deserialize week data from dictionary.

        Raises:
            InvalidWeekDataException: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidWeekDataException(
                f"Week data must be a JSON object, got {type(data).__name__}"
            )
        try:
            week_number = data["week_number"]
            if isinstance(week_number, bool) or not isinstance(week_number, int):
                raise TypeError(f"week_number must be an integer: {week_number!r}")
            raw_date = data.get("session_date")
            return cls(
                week_number=week_number,
                session_date=isoparse(raw_date).date() if raw_date else None,
                roster=list(data.get("roster", [])),
                assignments=[
                    GroupAssignment.from_dict(a) for a in data.get("assignments", [])
                ],
                score=PartitionScore.from_dict(data.get("score", {})),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidWeekDataException(f"Invalid week data: {e!r}") from e
