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

# --- Constants ---

# Separator placed between the two sorted names of a pair key
PAIR_KEY_SEPARATOR = "-"

# Scoring: evenness dominates pairing avoidance
EVENNESS_WEIGHT = 10

# Group sizes
DEFAULT_MAX_GROUP_SIZE = 3
MIN_GROUP_SIZE = 1

# Rosters above this size still get the full search, but log a warning
LARGE_ROSTER_WARNING_THRESHOLD = 10

# Spacing between consecutive weeks of a season
WEEK_INTERVAL_DAYS = 7

# Roster file comments
ROSTER_COMMENT_PREFIX = "#"

# Names used by the demo subcommand
DEMO_ROSTER_SMALL = ["Liam", "Mia", "Noah", "Olivia", "lucas", "james", "sarah"]
DEMO_ROSTER_LARGE = ["Liam", "Mia", "Noah", "Olivia", "1", "2", "3", "4", "5"]
