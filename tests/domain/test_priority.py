"""Tests for priority token normalisation."""

import pytest

from sabnzbd_client.domain.priority import PostProcessing, Priority, priority_from_token


class TestPriorityFromName:
    """Symbolic names map to protocol integers."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("paused", -2),
            ("low", -1),
            ("normal", 0),
            ("high", 1),
            ("forced", 2),
            ("force", 2),
        ],
    )
    def test_known_names(self, name, expected):
        assert priority_from_token(name) == expected

    @pytest.mark.parametrize(
        "name",
        ["High", "FORCED", "urgent", "", " low", "nan", "inf", "-Infinity", "1_000"],
    )
    def test_unknown_or_differently_cased_names_use_category_default(self, name):
        assert priority_from_token(name) == -100

    def test_none_uses_category_default(self):
        assert priority_from_token(None) == Priority.DEFAULT == -100


class TestPriorityPassThrough:
    """Numeric tokens are already protocol values and are returned unchanged."""

    @pytest.mark.parametrize("value", [-100, -2, -1, 0, 1, 2, 1.0])
    def test_numbers_pass_through(self, value):
        assert priority_from_token(value) == value

    @pytest.mark.parametrize("value", ["1", "-2", "0", "-100", "2.0"])
    def test_numeric_strings_pass_through_unchanged(self, value):
        result = priority_from_token(value)
        assert result == value
        assert isinstance(result, str)

    def test_enum_members_pass_through(self):
        assert priority_from_token(Priority.HIGH) == 1

    def test_booleans_are_not_numeric(self):
        assert priority_from_token(True) == -100  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_use_category_default(self, value):
        assert priority_from_token(value) == -100


class TestPostProcessing:
    def test_protocol_values(self):
        assert [int(pp) for pp in PostProcessing] == [-1, 0, 1, 2, 3]
