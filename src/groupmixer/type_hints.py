"""Type hints used in Group Mixer."""

from typing import MutableMapping, Sequence, Tuple

# An attendee is identified by name
Attendee = str

# Groups and partitions are immutable so enumeration branches never alias
Group = Tuple[Attendee, ...]
Partition = Tuple[Group, ...]

# Canonical "A-B" key for an unordered pair
PairKey = str

# Caller-owned pairing counts, mutated in place
PairCounts = MutableMapping[PairKey, int]

Roster = Sequence[Attendee]
