"""Tests for the shared check routine helpers."""

from __future__ import annotations

from typing import Any

import pytest

from fieldcheck.validation.rules.base import as_text, fail, is_absent, is_blank, is_empty


class TestAbsence:
    def test_missing_key_is_absent(self) -> None:
        assert is_absent({}, "f")

    def test_none_is_absent(self) -> None:
        assert is_absent({"f": None}, "f")

    @pytest.mark.parametrize("value", [0, "", False, []])
    def test_falsy_values_are_present(self, value: Any) -> None:
        assert not is_absent({"f": value}, "f")


class TestEmpty:
    @pytest.mark.parametrize("value", ["", [], {}, (), set()])
    def test_empty(self, value: Any) -> None:
        assert is_empty(value)

    @pytest.mark.parametrize("value", [0, 0.0, "0", False, " ", [None]])
    def test_zero_likes_are_not_empty(self, value: Any) -> None:
        assert not is_empty(value)

    def test_blank_combines_absent_and_empty(self) -> None:
        assert is_blank({}, "f")
        assert is_blank({"f": ""}, "f")
        assert not is_blank({"f": 0}, "f")


class TestAsText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("abc", "abc"), (12, "12"), (1.5, "1.5"), (True, "1"), (False, ""), ([1], None)],
    )
    def test_as_text(self, value: Any, expected: str | None) -> None:
        assert as_text(value) == expected


def test_fail_builds_record() -> None:
    failure = fail("age", "x", "numeric")
    assert failure.field == "age"
    assert failure.value == "x"
    assert failure.rule == "numeric"
    assert failure.param is None
