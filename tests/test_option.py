"""Tests for Option type (Some, Nothing)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from railyard import (
    ContractViolationError,
    Err,
    Nothing,
    NothingType,
    Ok,
    Some,
    all_some,
    first_some,
    from_optional,
    from_predicate,
    nothing,
    some,
)


class TestOptionCreation:
    """Tests for creating Option values."""

    def test_some_creation(self):
        """Some wraps a value."""
        assert Some(42).value == 42
        assert some(42) == Some(42)

    def test_nothing_is_singleton(self):
        """nothing() and NothingType() compare equal to Nothing."""
        assert nothing() is Nothing
        assert NothingType() == Nothing

    def test_from_optional(self):
        """from_optional maps None to Nothing and anything else to Some."""
        assert from_optional(3) == Some(3)
        assert from_optional(0) == Some(0)
        assert from_optional(None) is Nothing

    def test_from_predicate(self):
        """from_predicate keeps values that satisfy the predicate."""
        assert from_predicate(4, lambda x: x % 2 == 0) == Some(4)
        assert from_predicate(3, lambda x: x % 2 == 0) is Nothing


class TestOptionQuerying:
    """Tests for is_some / is_none."""

    def test_some(self, sample_some):
        """Some is some and not none."""
        assert sample_some.is_some()
        assert not sample_some.is_none()

    def test_nothing(self):
        """Nothing is none and not some."""
        assert Nothing.is_none()
        assert not Nothing.is_some()


class TestOptionUnwrap:
    """Tests for unwrap and its variants."""

    def test_unwrap_some(self, sample_some):
        """unwrap returns the value of Some."""
        assert sample_some.unwrap() == "hello"

    def test_unwrap_nothing_raises(self):
        """unwrap on Nothing is a contract violation."""
        with pytest.raises(ContractViolationError, match="Called unwrap on Nothing"):
            Nothing.unwrap()

    def test_unwrap_or(self):
        """unwrap_or falls back only for Nothing."""
        assert Some(1).unwrap_or(0) == 1
        assert Nothing.unwrap_or(0) == 0

    def test_unwrap_or_else(self):
        """unwrap_or_else calls the fallback only for Nothing."""
        assert Some(1).unwrap_or_else(lambda: pytest.fail("called")) == 1
        assert Nothing.unwrap_or_else(lambda: 7) == 7


class TestOptionCombinators:
    """Tests for map, and_then, or_else, filter and zip."""

    def test_map(self):
        """map transforms Some and skips Nothing."""
        assert Some(2).map(lambda x: x + 1) == Some(3)
        assert Nothing.map(lambda x: x + 1) is Nothing

    def test_and_then(self):
        """and_then flattens the returned Option."""
        half = lambda x: Some(x // 2) if x % 2 == 0 else Nothing  # noqa: E731
        assert Some(4).and_then(half) == Some(2)
        assert Some(3).and_then(half) is Nothing
        assert Nothing.and_then(half) is Nothing

    def test_or_else(self):
        """or_else keeps Some and replaces Nothing."""
        original = Some(1)
        assert original.or_else(lambda: Some(2)) is original
        assert Nothing.or_else(lambda: Some(2)) == Some(2)

    def test_filter(self):
        """filter drops values that fail the predicate."""
        original = Some(5)
        assert original.filter(lambda x: x > 3) is original
        assert Some(1).filter(lambda x: x > 3) is Nothing
        assert Nothing.filter(lambda x: True) is Nothing

    def test_zip(self):
        """zip pairs two Somes and yields Nothing otherwise."""
        assert Some(1).zip(Some("a")) == Some((1, "a"))
        assert Some(1).zip(Nothing) is Nothing
        assert Nothing.zip(Some(1)) is Nothing

    @given(st.integers())
    def test_map_identity(self, value):
        """Mapping identity leaves Some unchanged."""
        assert Some(value).map(lambda x: x) == Some(value)


class TestOptionConversion:
    """Tests for match, to_optional and ok_or."""

    def test_match(self):
        """match dispatches to the matching handler."""
        assert Some(2).match(some=lambda v: v * 10, none=lambda: 0) == 20
        assert Nothing.match(some=lambda v: v * 10, none=lambda: 0) == 0

    def test_structural_match(self):
        """Some and NothingType work with the match statement."""

        def describe(option):
            match option:
                case Some(value):
                    return f"some {value}"
                case NothingType():
                    return "nothing"

        assert describe(Some(1)) == "some 1"
        assert describe(Nothing) == "nothing"

    def test_to_optional(self):
        """to_optional unwraps to the value or None."""
        assert Some(1).to_optional() == 1
        assert Nothing.to_optional() is None

    def test_ok_or(self):
        """ok_or turns Some into Ok and Nothing into Err."""
        assert Some(1).ok_or("missing") == Ok(1)
        assert Nothing.ok_or("missing") == Err("missing")


class TestOptionCollections:
    """Tests for all_some and first_some."""

    def test_all_some(self):
        """all_some collects values when every option is Some."""
        assert all_some([Some(1), Some(2)]) == Some([1, 2])
        assert all_some([]) == Some([])

    def test_all_some_short_circuits(self):
        """all_some stops at the first Nothing."""
        consumed = []

        def options():
            for option in (Some(1), Nothing, Some(3)):
                consumed.append(option)
                yield option

        assert all_some(options()) is Nothing
        assert consumed == [Some(1), Nothing]

    def test_first_some(self):
        """first_some returns the first Some or Nothing."""
        assert first_some([Nothing, Some(1), Some(2)]) == Some(1)
        assert first_some([Nothing, Nothing]) is Nothing
        assert first_some([]) is Nothing
