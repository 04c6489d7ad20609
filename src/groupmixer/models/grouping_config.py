"""GroupingConfig data class."""

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
from pathlib import Path
from typing import Any, Dict, Union

from groupmixer.constants import DEFAULT_MAX_GROUP_SIZE, LARGE_ROSTER_WARNING_THRESHOLD
from groupmixer.exceptions import InvalidConfigurationException
from groupmixer.utils import read_json
from groupmixer.utils.validation import validate_max_group_size


@dataclass
class GroupingConfig:
    """Grouping configuration settings.

    Attributes
    ----------
    name : str
        Name of the meetup or class being grouped.
    max_group_size : int
        Largest group any attendee may be placed in.
    large_roster_warning_threshold : int
        Roster size above which a slow-search warning is logged.
    """

    name: str = "Weekly Groups"
    max_group_size: int = DEFAULT_MAX_GROUP_SIZE
    large_roster_warning_threshold: int = LARGE_ROSTER_WARNING_THRESHOLD

    def __post_init__(self) -> None:
        result = validate_max_group_size(self.max_group_size)
        if not result:
            raise InvalidConfigurationException(result.error_message)

        threshold = self.large_roster_warning_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise InvalidConfigurationException(
                f"Large roster warning threshold must be a non-negative integer: {threshold!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "max_group_size": self.max_group_size,
            "large_roster_warning_threshold": self.large_roster_warning_threshold,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupingConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: If the data is not an object or a
                setting has the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )
        return cls(
            name=data.get("name", "Weekly Groups"),
            max_group_size=data.get("max_group_size", DEFAULT_MAX_GROUP_SIZE),
            large_roster_warning_threshold=data.get(
                "large_roster_warning_threshold", LARGE_ROSTER_WARNING_THRESHOLD
            ),
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "GroupingConfig":
        """Load configuration from a JSON file."""
        return cls.from_dict(read_json(path))
