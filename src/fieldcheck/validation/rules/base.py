"""Shared contract and helpers for built-in check routines.

A check routine is a plain function::

    def check(field: str, record: Mapping[str, Any], param: str | None) -> FailureRecord | None

It returns None when the field passes and a FailureRecord when it fails.
Routines read the record but never modify it. Apart from the
required-family rules, every routine passes a field that is absent or
empty (see ``is_blank``), so optional fields only fail on the rules that
actually inspect a value.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord

CheckRoutine = Callable[[str, Mapping[str, Any], "str | None"], "FailureRecord | None"]


def is_absent(record: Mapping[str, Any], field: str) -> bool:
    """True when the field is missing from the record or holds None."""
    return record.get(field) is None


def is_empty(value: Any) -> bool:
    """True for ``""`` and empty containers.

    Zero-like values (``0``, ``0.0``, ``"0"``, ``False``) are present data,
    not empty.
    """
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def is_blank(record: Mapping[str, Any], field: str) -> bool:
    """Absent or empty: the condition under which optional rules pass."""
    return is_absent(record, field) or is_empty(record[field])


def as_text(value: Any) -> str | None:
    """Text form of a scalar value, or None for containers and uploads.

    Booleans render as ``"1"``/``""`` the way form data would submit them.
    """
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def fail(field: str, value: Any, rule: str, param: Any = None) -> FailureRecord:
    """Build the FailureRecord for a failing check."""
    return FailureRecord(field=field, value=value, rule=rule, param=param)
