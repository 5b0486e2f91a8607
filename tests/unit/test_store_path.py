"""Unit tests for StorePath value object."""

import pytest

from permstore.domain.value_objects import StorePath


def test_parse_splits_on_colon() -> None:
    """Segments come from splitting on ':'."""
    path = StorePath.parse("user:address:city")
    assert path.segments == ("user", "address", "city")
    assert path.head == "user"
    assert path.tail == "address:city"
    assert path.is_nested
    assert len(path) == 3
    assert str(path) == "user:address:city"


def test_single_segment_is_not_nested() -> None:
    path = StorePath.parse("name")
    assert not path.is_nested
    assert path.tail == ""


def test_empty_segments_are_kept() -> None:
    """Empty segments are literal names, not validated."""
    assert StorePath.parse("").segments == ("",)
    assert StorePath.parse("a::b").segments == ("a", "", "b")


def test_parse_rejects_non_string() -> None:
    with pytest.raises(TypeError, match="must be a string"):
        StorePath.parse(42)  # type: ignore[arg-type]


def test_empty_segments_tuple_rejected() -> None:
    with pytest.raises(ValueError, match="at least one segment"):
        StorePath(segments=())
