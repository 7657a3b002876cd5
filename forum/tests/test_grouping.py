# forum/tests/test_grouping.py
from forum.services.grouping import GroupedNames


def test_keeps_first_seen_order_and_drops_duplicates():
    grouped = GroupedNames()
    grouped.add(2, "Sci-Fi")
    grouped.add(1, "Drama")
    grouped.add(2, "Action")
    grouped.add(2, "Sci-Fi")
    assert list(grouped) == [2, 1]
    assert grouped.names(2) == ["Sci-Fi", "Action"]
    assert grouped.names(1) == ["Drama"]


def test_blank_names_register_parent_only():
    grouped = GroupedNames()
    grouped.add(5, None)
    grouped.add(5, "")
    grouped.add(5, "   ")
    assert 5 in grouped
    assert grouped.names(5) == []
    assert len(grouped) == 1


def test_add_joined_splits_and_trims():
    grouped = GroupedNames()
    grouped.add_joined(1, " Sci-Fi |Action| |Sci-Fi", "|")
    grouped.add_joined(2, None, "|")
    assert grouped.names(1) == ["Sci-Fi", "Action"]
    assert grouped.names(2) == []
    assert grouped.names(3) == []


def test_add_trims_like_add_joined():
    rows = GroupedNames()
    rows.add(1, " Action ")
    rows.add(1, "Action")
    joined = GroupedNames()
    joined.add_joined(1, " Action \x1fAction", "\x1f")
    assert rows.names(1) == joined.names(1) == ["Action"]
