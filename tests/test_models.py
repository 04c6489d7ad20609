import json
from datetime import date

import pytest

from groupmixer.exceptions import (
    DuplicateAttendeeException,
    FileLoadException,
    InvalidConfigurationException,
    InvalidHistoryException,
    InvalidWeekDataException,
)
from groupmixer.grouping import PartitionScore
from groupmixer.models import GroupAssignment, GroupingConfig, PairHistory, WeekData
from groupmixer.utils.validation import (
    validate_max_group_size,
    validate_roster_strict,
)


def test_pair_history_counts_are_shared_with_grouping():
    from groupmixer import group_attendees

    history = PairHistory()
    group_attendees(["A", "B", "C", "D"], history.counts, 2)

    assert history.pair_count("B", "A") == 1
    assert history.pair_count("C", "D") == 1
    assert history.pair_count("A", "C") == 0
    assert len(history) == 2


def test_pair_history_most_repeated():
    history = PairHistory(counts={"A-B": 1, "C-D": 3, "A-C": 3})
    assert history.most_repeated(2) == [("A-C", 3), ("C-D", 3)]


def test_pair_history_save_and_load(tmp_path):
    path = tmp_path / "history.json"
    PairHistory(counts={"A-B": 2}).save(path)

    assert json.loads(path.read_text(encoding="utf-8")) == {"pair_counts": {"A-B": 2}}
    assert PairHistory.load(path).counts == {"A-B": 2}


def test_pair_history_rejects_negative_counts():
    with pytest.raises(InvalidHistoryException):
        PairHistory.from_dict({"pair_counts": {"A-B": -1}})


def test_pair_history_load_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        PairHistory.load(tmp_path / "missing.json")


def test_pair_history_load_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        PairHistory.load(path)


def test_grouping_config_defaults_and_round_trip():
    config = GroupingConfig()
    assert config.max_group_size == 3
    restored = GroupingConfig.from_dict(
        {"name": "Book club", "max_group_size": 4, "large_roster_warning_threshold": 8}
    )
    assert restored == GroupingConfig("Book club", 4, 8)
    assert GroupingConfig.from_dict(restored.to_dict()) == restored


def test_grouping_config_rejects_bad_group_size():
    with pytest.raises(InvalidConfigurationException):
        GroupingConfig(max_group_size=0)


def test_week_data_round_trip():
    week = WeekData(
        week_number=2,
        session_date=date(2025, 1, 13),
        roster=["A", "B", "C"],
        assignments=[
            GroupAssignment("A", 1),
            GroupAssignment("C", 1),
            GroupAssignment("B", 2),
        ],
        score=PartitionScore(0, 1.0, 10.0),
    )
    data = week.to_dict()

    assert data["session_date"] == "2025-01-13"
    assert WeekData.from_dict(data) == week
    assert week.groups == [["A", "C"], ["B"]]


def test_week_data_without_date():
    week = WeekData.from_dict({"week_number": 1})
    assert week.session_date is None
    assert week.groups == []


def test_validation_results():
    assert validate_max_group_size(2)
    assert not validate_max_group_size(0)
    assert validate_roster_strict(None) == []
    with pytest.raises(DuplicateAttendeeException, match="A"):
        validate_roster_strict(["A", "B", "A"])


@pytest.mark.parametrize("threshold", ["10", True, -1, 2.5])
def test_grouping_config_rejects_bad_warning_threshold(threshold):
    with pytest.raises(InvalidConfigurationException):
        GroupingConfig(large_roster_warning_threshold=threshold)
    with pytest.raises(InvalidConfigurationException):
        GroupingConfig.from_dict({"large_roster_warning_threshold": threshold})


def test_grouping_config_accepts_zero_warning_threshold():
    assert GroupingConfig(large_roster_warning_threshold=0).large_roster_warning_threshold == 0


def test_grouping_config_load_rejects_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        GroupingConfig.load(path)


@pytest.mark.parametrize(
    "content",
    ["[]", '"pairs"', '{"pair_counts": []}', '{"pair_counts": {"A-B": "2"}}'],
)
def test_pair_history_load_rejects_wrong_shape(tmp_path, content):
    path = tmp_path / "history.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidHistoryException):
        PairHistory.load(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"roster": ["A"]},
        {"week_number": "1"},
        {"week_number": 1, "session_date": "not a date"},
        {"week_number": 1, "assignments": [{"name": "A"}]},
        {"week_number": 1, "score": []},
    ],
)
def test_week_data_rejects_malformed_data(data):
    with pytest.raises(InvalidWeekDataException):
        WeekData.from_dict(data)
