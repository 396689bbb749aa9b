"""Tests for property map helpers."""

from layercake.kernel import CHILDREN, merge, split_children, with_children


def child(props):
    return None


def test_split_children_separates_continuation() -> None:
    props = {"foo": 1, CHILDREN: child}

    continuation, rest = split_children(props)

    assert continuation is child
    assert rest == {"foo": 1}
    assert CHILDREN in props  # input untouched


def test_split_children_without_continuation() -> None:
    continuation, rest = split_children({"foo": 1})
    assert continuation is None
    assert rest == {"foo": 1}


def test_with_children_replaces_existing() -> None:
    def other(props):
        return None

    result = with_children({"foo": 1, CHILDREN: child}, other)

    assert result == {"foo": 1, CHILDREN: other}


def test_with_children_none_drops_key() -> None:
    assert with_children({"foo": 1, CHILDREN: child}, None) == {"foo": 1}


def test_merge_override_wins() -> None:
    base = {"a": 0, "c": 3}
    override = {"a": 1, "b": 2}

    assert merge(base, override) == {"a": 1, "b": 2, "c": 3}
    assert base == {"a": 0, "c": 3}
    assert override == {"a": 1, "b": 2}
