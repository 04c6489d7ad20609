"""Data models for Group Mixer."""

from groupmixer.models.group_assignment import GroupAssignment
from groupmixer.models.grouping_config import GroupingConfig
from groupmixer.models.pair_history import PairHistory
from groupmixer.models.week_data import WeekData

__all__ = ["GroupAssignment", "GroupingConfig", "PairHistory", "WeekData"]
