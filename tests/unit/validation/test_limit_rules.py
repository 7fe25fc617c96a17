"""Tests for length, numeric range and array size rules.

Boundaries are inclusive: a value exactly at the limit passes and one
step past it fails.
"""

from __future__ import annotations

from typing import Any

import pytest

from fieldcheck.models.results import FailureRecord
from fieldcheck.validation.rules import CheckRoutine
from fieldcheck.validation.rules.limits import (
    check_array_size_equal,
    check_array_size_greater,
    check_array_size_lesser,
    check_exact_len,
    check_max_len,
    check_max_numeric,
    check_min_len,
    check_min_numeric,
    get_limit_rules,
)


def _run(routine: CheckRoutine, value: Any, param: str | None) -> FailureRecord | None:
    return routine("f", {"f": value}, param)


class TestLengthRules:
    def test_max_len_boundary(self) -> None:
        assert _run(check_max_len, "abcde", "5") is None
        failure = _run(check_max_len, "abcdef", "5")
        assert failure is not None
        assert failure.rule == "max_len"
        assert failure.param == "5"

    def test_min_len_boundary(self) -> None:
        assert _run(check_min_len, "abc", "3") is None
        assert _run(check_min_len, "ab", "3") is not None

    def test_exact_len(self) -> None:
        assert _run(check_exact_len, "1234", "4") is None
        assert _run(check_exact_len, "123", "4") is not None
        assert _run(check_exact_len, "12345", "4") is not None

    def test_counts_code_points(self) -> None:
        assert _run(check_max_len, "ééé", "3") is None

    def test_number_uses_text_length(self) -> None:
        assert _run(check_max_len, 12345, "5") is None
        assert _run(check_max_len, 123456, "5") is not None

    def test_container_fails(self) -> None:
        assert _run(check_max_len, ["a"], "5") is not None

    def test_empty_value_skipped(self) -> None:
        assert _run(check_min_len, "", "3") is None

    def test_bad_param_raises(self) -> None:
        with pytest.raises(ValueError):
            _run(check_max_len, "abc", "five")


class TestNumericRules:
    def test_max_numeric_boundary(self) -> None:
        assert _run(check_max_numeric, "50", "50") is None
        assert _run(check_max_numeric, "50.01", "50") is not None

    def test_min_numeric_boundary(self) -> None:
        assert _run(check_min_numeric, 0, "0") is None
        assert _run(check_min_numeric, -1, "0") is not None

    def test_decimal_precision(self) -> None:
        assert _run(check_max_numeric, "0.3", "0.3") is None

    def test_non_numeric_value_fails(self) -> None:
        assert _run(check_max_numeric, "abc", "10") is not None

    def test_non_ascii_digits_fail(self) -> None:
        assert _run(check_max_numeric, "\u0661\u0662\u0663", "200") is not None

    def test_non_numeric_bound_fails(self) -> None:
        failure = _run(check_min_numeric, "5", "ten")
        assert failure is not None
        assert failure.param == "ten"

    def test_zero_is_checked(self) -> None:
        """Zero is a present value, so range rules still inspect it."""
        assert _run(check_min_numeric, 0, "1") is not None


class TestArraySizeRules:
    def test_greater_is_inclusive(self) -> None:
        assert _run(check_array_size_greater, [1, 2], "2") is None
        assert _run(check_array_size_greater, [1], "2") is not None

    def test_lesser_is_inclusive(self) -> None:
        assert _run(check_array_size_lesser, [1, 2], "2") is None
        assert _run(check_array_size_lesser, [1, 2, 3], "2") is not None

    def test_equal(self) -> None:
        assert _run(check_array_size_equal, (1, 2, 3), "3") is None
        failure = _run(check_array_size_equal, [1, 2], "3")
        assert failure is not None
        assert failure.rule == "valid_array_size_equal"

    def test_non_list_fails(self) -> None:
        assert _run(check_array_size_equal, "abc", "3") is not None


class TestLimitRegistry:
    def test_names(self) -> None:
        rules = get_limit_rules()
        assert rules["max_len"] is check_max_len
        assert "valid_array_size_greater" in rules
        assert len(rules) == 8
