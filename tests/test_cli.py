import json

import pytest

from groupmixer.cli import main, parse_session_date, read_roster_file
from groupmixer.controllers import WeekManager


def test_assign_prints_groups(capsys):
    assert main(["assign", "A", "B", "C", "D", "--max-group-size", "2"]) == 0
    out = capsys.readouterr().out
    assert "Group 1: A, B" in out
    assert "Group 2: C, D" in out


def test_assign_json_output(capsys):
    assert main(["assign", "A", "B", "C", "--max-group-size", "2", "--json"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert records == [
        {"name": "A", "group": 1},
        {"name": "B", "group": 1},
        {"name": "C", "group": 2},
    ]


def test_assign_threads_history_file(tmp_path, capsys):
    history = tmp_path / "pairs.json"
    args = ["assign", "A", "B", "C", "D", "--max-group-size", "2"]
    args += ["--history", str(history)]

    assert main(args) == 0
    assert main(args) == 0
    out = capsys.readouterr().out

    assert "Group 1: A, C" in out
    saved = json.loads(history.read_text(encoding="utf-8"))
    assert saved == {"pair_counts": {"A-B": 1, "C-D": 1, "A-C": 1, "B-D": 1}}


def test_assign_reads_roster_file_and_config(tmp_path, capsys):
    roster = tmp_path / "roster.txt"
    roster.write_text("# this week\nA\n\nB\nC\n", encoding="utf-8")
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"max_group_size": 1}), encoding="utf-8")

    assert main(["assign", "--roster-file", str(roster), "--config", str(config)]) == 0
    out = capsys.readouterr().out
    assert "Group 3: C" in out


def test_read_roster_file_skips_comments(tmp_path):
    roster = tmp_path / "roster.txt"
    roster.write_text("  Liam \n#Mia\nNoah\n", encoding="utf-8")
    assert read_roster_file(str(roster)) == ["Liam", "Noah"]


def test_assign_with_duplicate_names_fails():
    assert main(["assign", "A", "B", "A"]) == 1


def test_assign_with_missing_roster_file_fails(tmp_path):
    assert main(["assign", "--roster-file", str(tmp_path / "nope.txt")]) == 1


def test_invalid_group_size_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["assign", "A", "--max-group-size", "0"])
    assert excinfo.value.code == 2


def test_week_command_builds_season(tmp_path, capsys):
    season = tmp_path / "season.json"
    base = ["week", "A", "B", "C", "D", "--season", str(season), "--max-group-size", "2"]

    assert main(base + ["--date", "2025-01-06"]) == 0
    assert main(base) == 0
    out = capsys.readouterr().out

    assert "Week 1 (2025-01-06)" in out
    assert "Week 2 (2025-01-13)" in out
    data = json.loads(season.read_text(encoding="utf-8"))
    assert [w["week_number"] for w in data["weeks"]] == [1, 2]
    assert data["config"]["max_group_size"] == 2


def test_parse_session_date_accepts_common_formats():
    assert parse_session_date("2025-03-04").isoformat() == "2025-03-04"
    assert parse_session_date("March 4, 2025").isoformat() == "2025-03-04"


def test_demo_runs(capsys):
    assert main(["demo"]) == 0
    out = capsys.readouterr().out
    assert "Pair history:" in out
    assert "Most repeated pairs:" in out
    assert "Liam" in out


@pytest.mark.parametrize(
    "config_data",
    [{"large_roster_warning_threshold": "10"}, {"max_group_size": "3"}, []],
)
def test_assign_with_invalid_config_fails(tmp_path, config_data):
    config = tmp_path / "config.json"
    config.write_text(json.dumps(config_data), encoding="utf-8")
    assert main(["assign", "A", "B", "C", "--config", str(config)]) == 1


@pytest.mark.parametrize("content", ["[]", '{"pair_counts": []}', "{not json"])
def test_assign_with_malformed_history_fails(tmp_path, content):
    history = tmp_path / "pairs.json"
    history.write_text(content, encoding="utf-8")
    assert main(["assign", "A", "B", "--history", str(history)]) == 1
    assert history.read_text(encoding="utf-8") == content


@pytest.mark.parametrize(
    "season_data",
    [
        [],
        {"weeks": [{"session_date": "2025-01-06"}]},
        {"weeks": [{"week_number": 1, "session_date": "someday"}]},
    ],
)
def test_week_with_malformed_season_fails(tmp_path, season_data):
    season = tmp_path / "season.json"
    season.write_text(json.dumps(season_data), encoding="utf-8")
    assert main(["week", "A", "B", "--season", str(season)]) == 1


def test_week_reports_season_total(tmp_path, capsys):
    season = tmp_path / "season.json"
    args = ["week", "A", "B", "C", "--season", str(season), "--max-group-size", "2"]

    assert main(args) == 0
    assert main(args) == 0
    out = capsys.readouterr().out.splitlines()

    totals = [line for line in out if line.startswith("Season total score:")]
    week_two = WeekManager.load(season)
    assert len(totals) == 2
    assert totals[-1] == f"Season total score: {week_two.total_score():.2f}"
