"""Controllers coordinating grouping across weeks."""

from groupmixer.controllers.week_manager import WeekManager

__all__ = ["WeekManager"]
