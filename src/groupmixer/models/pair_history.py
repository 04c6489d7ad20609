"""Data model for pairing history."""

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
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from groupmixer.exceptions import InvalidHistoryException
from groupmixer.grouping.history import pair_key
from groupmixer.utils import read_json, setup_logger, write_json

logger = setup_logger(__name__)


@dataclass
class PairHistory:
    """
    Tracks how many times each pair of attendees has shared a group.

    ``counts`` is a plain dict and is what the grouping functions mutate;
    pass ``history.counts`` as the ``pair_history`` argument.

    Attributes
    ----------
    counts : dict of str to int
        Mapping of canonical pair keys (``"A-B"``) to meeting counts.
    """

    counts: Dict[str, int] = field(default_factory=dict)

    def pair_count(self, first: str, second: str) -> int:
        """Return how many times two attendees have been grouped together."""
        return self.counts.get(pair_key(first, second), 0)

    def most_repeated(self, limit: int = 5) -> List[Tuple[str, int]]:
        """Return the most frequent pairings, highest count first."""
        ranked = sorted(self.counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]

    def __len__(self) -> int:
        return len(self.counts)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pair history to dictionary."""
        return {"pair_counts": dict(self.counts)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairHistory":
        """Deserialize pair history from dictionary.

        Raises:
            InvalidHistoryException: If the data is not shaped like
                ``{"pair_counts": {...}}`` or a count is not a non-negative integer
        """
        if not isinstance(data, dict):
            raise InvalidHistoryException(
                f"Pair history must be a JSON object, got {type(data).__name__}"
            )
        raw_counts = data.get("pair_counts", {})
        if not isinstance(raw_counts, dict):
            raise InvalidHistoryException(
                f"pair_counts must be a JSON object, got {type(raw_counts).__name__}"
            )

        counts: Dict[str, int] = {}
        for key, value in raw_counts.items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidHistoryException(
                    f"Pair count for {key!r} must be a non-negative integer: {value!r}"
                )
            counts[str(key)] = value
        return cls(counts=counts)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "PairHistory":
        """Load pair history from a JSON file."""
        history = cls.from_dict(read_json(path))
        logger.info("Loaded %d pair entries from %s", len(history), path)
        return history

    def save(self, path: Union[str, Path]) -> None:
        """Save pair history to a JSON file."""
        write_json(path, self.to_dict())
        logger.info("Saved %d pair entries to %s", len(self), path)
