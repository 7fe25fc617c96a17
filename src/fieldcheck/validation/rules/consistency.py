"""Cross-field consistency rules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord
from fieldcheck.parsing.params import require_param
from fieldcheck.validation.rules.base import CheckRoutine, fail, is_blank


def check_equalsfield(
    field: str, record: Mapping[str, Any], param: str | None = None
) -> FailureRecord | None:
    """Value must equal the value of another field in the same record.

    Usage: ``'password' => 'equalsfield,password_confirm'``. When the other
    field is absent the check fails, since a present value cannot equal a
    missing one.
    """
    if is_blank(record, field):
        return None
    other = require_param("equalsfield", param).strip()
    value = record[field]
    if other in record and record[other] is not None and record[other] == value:
        return None
    return fail(field, value, "equalsfield", other)


def get_consistency_rules() -> dict[str, CheckRoutine]:
    """Return cross-field rule routines keyed by rule name."""
    return {
        "equalsfield": check_equalsfield,
    }
