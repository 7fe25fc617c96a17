"""Presence rules: ``required`` and ``required_file``.

These are the only built-in rules that fail on an absent field. Every
other rule treats absence as a pass, so a field is mandatory only when one
of these rules is declared for it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord
from fieldcheck.models.rules import as_upload
from fieldcheck.validation.rules.base import CheckRoutine, fail, is_absent, is_empty


def check_required(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Fail when the field is absent, ``""`` or an empty container.

    ``0``, ``0.0``, ``"0"`` and ``False`` count as present.
    """
    if not is_absent(record, field) and not is_empty(record[field]):
        return None
    return fail(field, None, "required", param)


def check_required_file(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Fail unless the field holds an upload that actually carries a file."""
    value = record.get(field)
    upload = as_upload(value)
    if upload is not None and upload.has_file:
        return None
    return fail(field, value, "required_file", param)


def get_presence_rules() -> dict[str, CheckRoutine]:
    """Return presence rule routines keyed by rule name."""
    return {
        "required": check_required,
        "required_file": check_required_file,
    }
