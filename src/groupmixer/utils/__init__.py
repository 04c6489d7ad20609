"""Shared utilities for Group Mixer."""

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

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from groupmixer.exceptions import FileLoadException, FileSaveException

ROOT_LOGGER_NAME = "groupmixer"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a logger that writes through the shared ``groupmixer`` handler.

    The handler is attached once to the package root logger; module loggers
    propagate to it.

    Args:
        name: Logger name, normally ``__name__``
        level: Optional level to set on the package root logger

    Returns:
        Configured logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
    if level is not None:
        root.setLevel(level)
    return logging.getLogger(name)


logger = setup_logger(__name__)


def read_json(path: Union[str, Path]) -> Any:
    """Load JSON data from a file.

    Raises:
        FileLoadException: If the file is missing or not valid JSON
    """
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not load {file_path}: {e}") from e
    logger.debug("Loaded %s", file_path)
    return data


def write_json(path: Union[str, Path], data: Any) -> None:
    """Write JSON data to a file, creating parent directories as needed.

    Raises:
        FileSaveException: If the file cannot be written
    """
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except (OSError, TypeError) as e:
        raise FileSaveException(f"Could not save {file_path}: {e}") from e
    logger.debug("Saved %s", file_path)
