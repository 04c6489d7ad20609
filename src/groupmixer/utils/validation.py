"""Validation utilities for Group Mixer.

This module provides reusable validation functions with consistent error handling.
"""

from collections import Counter
from collections.abc import Iterable
from typing import Any, List, Optional

from groupmixer.constants import MIN_GROUP_SIZE
from groupmixer.exceptions import (
    DuplicateAttendeeException,
    InvalidGroupSizeException,
    InvalidRosterException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Group Size Validation ==========


def validate_max_group_size(value: Any) -> ValidationResult:
    """Validate a maximum group size.

    Only real integers are accepted; ``True``/``False`` and floats such as
    ``2.0`` are rejected.

    Args:
        value: Candidate maximum group size

    Returns:
        ValidationResult with the size as ``sanitized_value`` when valid
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Maximum group size must be an integer: {value!r}",
        )

    if value < MIN_GROUP_SIZE:
        return ValidationResult(
            is_valid=False,
            error_message=f"Maximum group size must be at least {MIN_GROUP_SIZE}: {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_max_group_size_strict(value: Any) -> int:
    """Validate a maximum group size and return it or raise exception.

    Args:
        value: Candidate maximum group size

    Returns:
        The validated size

    Raises:
        InvalidGroupSizeException: If the size is not a positive integer
    """
    result = validate_max_group_size(value)
    if not result.is_valid:
        raise InvalidGroupSizeException(result.error_message)
    return result.sanitized_value


# ========== Roster Validation ==========


def find_duplicate_attendees(roster: List[str]) -> List[str]:
    """Return names that appear more than once, in first-seen order."""
    counts = Counter(roster)
    return [name for name in counts if counts[name] > 1]


def validate_roster_strict(roster: Any) -> List[str]:
    """Validate a roster and return it as a list or raise exception.

    A missing roster (``None``) is valid and normalised to an empty list.

    Args:
        roster: Sequence of attendee names, or None

    Returns:
        The roster as a new list, in input order

    Raises:
        InvalidRosterException: If the roster is not a sequence of strings
        DuplicateAttendeeException: If a name appears more than once
    """
    if roster is None:
        return []

    if isinstance(roster, (str, bytes)) or not isinstance(roster, Iterable):
        raise InvalidRosterException(
            f"Roster must be a sequence of names: {roster!r}"
        )

    names = list(roster)
    for name in names:
        if not isinstance(name, str):
            raise InvalidRosterException(f"Attendee names must be strings: {name!r}")

    duplicates = find_duplicate_attendees(names)
    if duplicates:
        raise DuplicateAttendeeException(
            f"Duplicate attendees in roster: {', '.join(duplicates)}"
        )

    return names
