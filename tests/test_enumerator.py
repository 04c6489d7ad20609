from groupmixer.grouping import enumerate_partitions, max_group_count


def _names(count):
    return [f"P{i}" for i in range(1, count + 1)]


def _flatten(partition):
    return [name for group in partition for name in group]


def test_three_attendees_pairs_in_decision_order():
    partitions = list(enumerate_partitions(["A", "B", "C"], 2))
    assert partitions == [
        (("A", "B"), ("C",)),
        (("A", "C"), ("B",)),
        (("A",), ("B", "C")),
    ]


def test_four_attendees_max_two_yields_every_matching_once():
    partitions = list(enumerate_partitions(["A", "B", "C", "D"], 2))
    assert partitions == [
        (("A", "B"), ("C", "D")),
        (("A", "C"), ("B", "D")),
        (("A", "D"), ("B", "C")),
    ]


def test_partitions_are_complete_and_disjoint():
    roster = _names(7)
    for partition in enumerate_partitions(roster, 3):
        flat = _flatten(partition)
        assert sorted(flat) == sorted(roster)
        assert len(flat) == len(set(flat))


def test_group_size_and_group_count_bounds():
    roster = _names(7)
    limit = max_group_count(len(roster), 3)
    assert limit == 3
    for partition in enumerate_partitions(roster, 3):
        assert len(partition) <= limit
        assert all(1 <= len(group) <= 3 for group in partition)


def test_partition_counts():
    # 3-3-1 splits (70) plus 3-2-2 splits (105)
    assert len(list(enumerate_partitions(_names(7), 3))) == 175
    # 3-1 splits (4) plus 2-2 splits (3)
    assert len(list(enumerate_partitions(["A", "B", "C", "D"], 3))) == 7


def test_max_size_one_gives_only_singletons():
    partitions = list(enumerate_partitions(["A", "B", "C"], 1))
    assert partitions == [(("A",), ("B",), ("C",))]


def test_max_size_at_least_roster_gives_single_group():
    partitions = list(enumerate_partitions(["A", "B", "C"], 5))
    assert partitions == [(("A", "B", "C"),)]


def test_roster_order_is_preserved_within_groups():
    for partition in enumerate_partitions(["D", "C", "B", "A"], 2):
        for group in partition:
            positions = [["D", "C", "B", "A"].index(name) for name in group]
            assert positions == sorted(positions)


def test_empty_roster_yields_nothing():
    assert list(enumerate_partitions([], 3)) == []


def test_enumeration_is_lazy():
    partitions = enumerate_partitions(_names(12), 3)
    first = next(partitions)
    assert sorted(_flatten(first)) == sorted(_names(12))
