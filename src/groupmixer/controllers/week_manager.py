"""Week management for recurring groupings.

This module threads one pair history through successive weeks, keeping a
record of each week's roster, grouping and score.
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

from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from dateutil.relativedelta import relativedelta

from groupmixer.constants import WEEK_INTERVAL_DAYS
from groupmixer.exceptions import InvalidWeekDataException, WeekNotFoundException
from groupmixer.grouping import (
    find_best_grouping,
    format_assignments,
    record_partition,
)
from groupmixer.models import GroupingConfig, PairHistory, WeekData
from groupmixer.utils import read_json, setup_logger, write_json
from groupmixer.utils.validation import validate_roster_strict

logger = setup_logger(__name__)


class WeekManager:
    """Manages week progression for a recurring group.

    This class is responsible for:
    - Grouping each new week's roster against the shared pair history
    - Tracking week history
    - Defaulting session dates one week apart
    - Saving and loading the whole season
    """

    def __init__(
        self,
        config: Optional[GroupingConfig] = None,
        pair_history: Optional[PairHistory] = None,
    ):
        """Initialize the week manager.

        Args:
            config: Grouping settings; defaults to GroupingConfig()
            pair_history: History shared by every week; defaults to an empty one
        """
        self.config = config if config is not None else GroupingConfig()
        self.pair_history = pair_history if pair_history is not None else PairHistory()
        self.weeks: List[WeekData] = []

    @property
    def current_week_number(self) -> int:
        """Get the number of the latest week (1-indexed).

        Returns:
            The latest week number, or 0 if no weeks have been created.
        """
        return len(self.weeks)

    def get_week(self, week_number: int) -> WeekData:
        """Get data for a specific week.

        Args:
            week_number: The week number (1-indexed)

        Raises:
            WeekNotFoundException: If no such week exists
        """
        if 1 <= week_number <= len(self.weeks):
            return self.weeks[week_number - 1]
        logger.error("Invalid week number: %s", week_number)
        raise WeekNotFoundException(
            f"Week {week_number} does not exist ({len(self.weeks)} weeks recorded)"
        )

    def next_session_date(self) -> Optional[date]:
        """Date one week after the latest dated week, or None."""
        if not self.weeks or self.weeks[-1].session_date is None:
            return None
        return self.weeks[-1].session_date + relativedelta(days=WEEK_INTERVAL_DAYS)

    def create_next_week(
        self,
        roster: Optional[Iterable[str]],
        session_date: Optional[date] = None,
    ) -> WeekData:
        """Group the roster for the next week and record it.

        Args:
            roster: Attendees present this week
            session_date: Meeting date; defaults to a week after the previous one

        Returns:
            WeekData for the new week

        Raises:
            GroupingException: If the roster or configured group size is invalid.
                No week is recorded and the history is unchanged.
        """
        attendees = validate_roster_strict(roster)
        best = find_best_grouping(
            attendees,
            self.pair_history.counts,
            self.config.max_group_size,
            self.config.large_roster_warning_threshold,
        )

        week_number = len(self.weeks) + 1
        if session_date is None:
            session_date = self.next_session_date()

        if best is None:
            week = WeekData(week_number=week_number, session_date=session_date)
        else:
            partition, score = best
            record_partition(partition, self.pair_history.counts)
            week = WeekData(
                week_number=week_number,
                session_date=session_date,
                roster=attendees,
                assignments=format_assignments(partition),
                score=score,
            )

        self.weeks.append(week)
        logger.info(
            "Week %d created with %d groups (total score %.2f)",
            week_number,
            len(week.groups),
            week.score.total_score,
        )
        return week

    def total_score(self) -> float:
        """Sum of the chosen total scores across all weeks."""
        return sum(week.score.total_score for week in self.weeks)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the season to dictionary."""
        return {
            "config": self.config.to_dict(),
            "pair_history": self.pair_history.to_dict(),
            "weeks": [week.to_dict() for week in self.weeks],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeekManager":
        """Deserialize a season from dictionary.

        Raises:
            InvalidWeekDataException: If the season or one of its weeks is malformed
            InvalidConfigurationException: If the stored config is invalid
            InvalidHistoryException: If the stored pair history is invalid
        """
        if not isinstance(data, dict):
            raise InvalidWeekDataException(
                f"Season must be a JSON object, got {type(data).__name__}"
            )
        weeks = data.get("weeks", [])
        if not isinstance(weeks, list):
            raise InvalidWeekDataException(
                f"weeks must be a JSON list, got {type(weeks).__name__}"
            )

        manager = cls(
            config=GroupingConfig.from_dict(data.get("config", {})),
            pair_history=PairHistory.from_dict(data.get("pair_history", {})),
        )
        manager.weeks = [WeekData.from_dict(w) for w in weeks]
        return manager

    @classmethod
    def load(cls, path: Union[str, Path]) -> "WeekManager":
        """Load a season from a JSON file."""
        manager = cls.from_dict(read_json(path))
        logger.info("Loaded season with %d weeks from %s", len(manager.weeks), path)
        return manager

    def save(self, path: Union[str, Path]) -> None:
        """Save the season to a JSON file."""
        write_json(path, self.to_dict())
        logger.info("Saved season with %d weeks to %s", len(self.weeks), path)
