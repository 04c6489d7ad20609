"""Command-line interface for Group Mixer.

This module provides the ``groupmixer`` command: grouping a single roster,
running the next week of a saved season, and a short demonstration.
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

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from dateutil import parser as date_parser

from groupmixer.constants import (
    DEMO_ROSTER_LARGE,
    DEMO_ROSTER_SMALL,
    ROSTER_COMMENT_PREFIX,
)
from groupmixer.controllers import WeekManager
from groupmixer.exceptions import FileLoadException, GroupMixerException
from groupmixer.grouping import assignments_to_groups, group_attendees
from groupmixer.models import GroupAssignment, GroupingConfig, PairHistory, WeekData
from groupmixer.utils import setup_logger

logger = setup_logger(__name__)


def parse_group_size(value: str) -> int:
    """Parse a maximum group size argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive integer
    """
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid group size '{value}'. Must be an integer"
        )
    if size < 1:
        raise argparse.ArgumentTypeError(f"Group size must be at least 1, got {size}")
    return size


def parse_session_date(value: str) -> date:
    """Parse a session date in any format dateutil understands.

    Examples:
        >>> parse_session_date("2025-03-04")
        datetime.date(2025, 3, 4)
    """
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError):
        raise argparse.ArgumentTypeError(f"Invalid date '{value}'")


def read_roster_file(path: str) -> List[str]:
    """Read attendee names from a text file, one per line.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        FileLoadException: If the file cannot be read
    """
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise FileLoadException(f"Could not read roster {path}: {e}") from e

    names = []
    for line in lines:
        name = line.strip()
        if name and not name.startswith(ROSTER_COMMENT_PREFIX):
            names.append(name)
    return names


def collect_roster(args: argparse.Namespace) -> List[str]:
    """Combine names given on the command line with those from --roster-file."""
    roster = list(args.names)
    if args.roster_file:
        roster.extend(read_roster_file(args.roster_file))
    return roster


def load_configuration(args: argparse.Namespace) -> GroupingConfig:
    """Build the grouping configuration from --config and --max-group-size."""
    config = GroupingConfig.load(args.config) if args.config else GroupingConfig()
    if args.max_group_size is not None:
        config.max_group_size = args.max_group_size
    return config


def format_groups(assignments: Sequence[GroupAssignment]) -> str:
    """Render assignments as one line per group."""
    lines = []
    for number, names in enumerate(assignments_to_groups(assignments), start=1):
        lines.append(f"Group {number}: {', '.join(names)}")
    return "\n".join(lines)


def print_assignments(assignments: Sequence[GroupAssignment], as_json: bool) -> None:
    if as_json:
        print(json.dumps([a.to_dict() for a in assignments], indent=2))
    elif assignments:
        print(format_groups(assignments))
    else:
        print("No attendees to group.")


def print_history(pair_counts: Dict[str, int]) -> None:
    print(json.dumps(pair_counts, indent=2, sort_keys=True))


def run_assign(args: argparse.Namespace) -> int:
    """Group one roster, optionally threading a history file.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_configuration(args)
    roster = collect_roster(args)

    history_path = Path(args.history) if args.history else None
    if history_path and history_path.exists():
        history = PairHistory.load(history_path)
    else:
        history = PairHistory()

    assignments = group_attendees(
        roster,
        history.counts,
        config.max_group_size,
        config.large_roster_warning_threshold,
    )
    print_assignments(assignments, args.json)

    if history_path:
        history.save(history_path)
    return 0


def print_week(week: WeekData, as_json: bool) -> None:
    if as_json:
        print(json.dumps(week.to_dict(), indent=2))
        return

    heading = f"Week {week.week_number}"
    if week.session_date:
        heading += f" ({week.session_date.isoformat()})"
    print(heading)
    print("=" * len(heading))
    print_assignments(week.assignments, as_json=False)
    print(
        f"Pairing score: {week.score.pairing_score}  "
        f"Evenness score: {week.score.evenness_score:.2f}"
    )


def run_week(args: argparse.Namespace) -> int:
    """Run the next week of a season file, creating the file if needed.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    season_path = Path(args.season)
    if season_path.exists():
        manager = WeekManager.load(season_path)
        if args.max_group_size is not None:
            manager.config.max_group_size = args.max_group_size
    else:
        logger.info("Starting new season at %s", season_path)
        manager = WeekManager(config=load_configuration(args))

    week = manager.create_next_week(collect_roster(args), args.date)
    print_week(week, args.json)
    if not args.json:
        print(f"Season total score: {manager.total_score():.2f}")
    manager.save(season_path)
    return 0


def run_demo(args: argparse.Namespace) -> int:
    """Group two example rosters that share one pair history."""
    history = PairHistory()

    for roster in (DEMO_ROSTER_SMALL, DEMO_ROSTER_LARGE):
        print("=" * 70)
        print(f"Roster: {', '.join(roster)} (max group size {args.max_group_size})")
        print("=" * 70)
        assignments = group_attendees(roster, history.counts, args.max_group_size)
        print_assignments(assignments, args.json)
        print("\nPair history:")
        print_history(history.counts)
        print()

    print("Most repeated pairs:")
    for key, count in history.most_repeated(3):
        print(f"  {key}: {count}")
    return 0


def add_roster_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("names", nargs="*", help="Attendee names, in order")
    parser.add_argument(
        "--roster-file",
        help="Text file with one attendee name per line (appended after NAMES)",
    )
    parser.add_argument(
        "--max-group-size",
        type=parse_group_size,
        default=None,
        help="Largest allowed group (default: from --config, or 3)",
    )
    parser.add_argument(
        "--config", help="JSON configuration file (see GroupingConfig)"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="groupmixer",
        description="Split attendees into small groups, avoiding repeat pairings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Group a roster into groups of at most 3, remembering past pairings
  groupmixer assign Liam Mia Noah Olivia Lucas --history pairs.json

  # Read the roster from a file
  groupmixer assign --roster-file attendees.txt --max-group-size 4

  # Run the next week of a season
  groupmixer week --season season.json --date 2025-03-04 Liam Mia Noah Olivia

  # Show the built-in example
  groupmixer demo
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    assign_parser = subparsers.add_parser("assign", help="Group a single roster")
    add_roster_arguments(assign_parser)
    assign_parser.add_argument(
        "--history",
        help="Pair history JSON file; read if present and updated afterwards",
    )
    assign_parser.set_defaults(func=run_assign)

    week_parser = subparsers.add_parser(
        "week", help="Group the next week of a season file"
    )
    add_roster_arguments(week_parser)
    week_parser.add_argument(
        "--season", required=True, help="Season JSON file (created if missing)"
    )
    week_parser.add_argument(
        "--date",
        type=parse_session_date,
        default=None,
        help="Session date (default: one week after the previous week)",
    )
    week_parser.set_defaults(func=run_week)

    demo_parser = subparsers.add_parser("demo", help="Run the built-in example")
    demo_parser.add_argument(
        "--max-group-size", type=parse_group_size, default=3, help="(default: 3)"
    )
    demo_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    demo_parser.set_defaults(func=run_demo)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logger(__name__, logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return args.func(args)
    except GroupMixerException as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
