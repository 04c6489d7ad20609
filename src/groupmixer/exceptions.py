"""Exceptions for use in Group Mixer"""

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


# ========== Base Application Exception ==========


class GroupMixerException(Exception):
    """Base exception for all Group Mixer errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Grouping Exceptions ==========


class GroupingException(GroupMixerException):
    """Base exception for grouping-related errors."""

    pass


class InvalidGroupSizeException(GroupingException):
    """Raised when the maximum group size is not a positive integer."""

    pass


class InvalidRosterException(GroupingException):
    """Raised when a roster is not a sequence of attendee names."""

    pass


class DuplicateAttendeeException(GroupingException):
    """Raised when the same attendee appears twice in one roster."""

    pass


# ========== History Exceptions ==========


class HistoryException(GroupMixerException):
    """Base exception for pair history errors."""

    pass


class InvalidHistoryException(HistoryException):
    """Raised when pair history data is malformed (e.g., negative counts)."""

    pass


# ========== Week Exceptions ==========


class WeekException(GroupMixerException):
    """Base exception for week/season errors."""

    pass


class WeekNotFoundException(WeekException):
    """Raised when a requested week does not exist."""

    pass


class InvalidWeekDataException(WeekException):
    """Raised when saved week or season data is malformed."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(GroupMixerException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(GroupMixerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
