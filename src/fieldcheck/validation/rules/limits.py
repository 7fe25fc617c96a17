"""Length, numeric range and array size rules.

All comparisons are boundary-inclusive: ``max_len,5`` accepts a value of
exactly five characters, ``min_numeric,0`` accepts ``0``. Lengths count
Unicode code points, not bytes.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping
from typing import Any

from fieldcheck.models.results import FailureRecord
from fieldcheck.parsing.params import parse_int_param, parse_numeric
from fieldcheck.validation.rules.base import CheckRoutine, as_text, fail, is_blank

Comparison = Callable[[Any, Any], bool]


def _length_rule(rule: str, compare: Comparison) -> CheckRoutine:
    def check(
        field: str, record: Mapping[str, Any], param: str | None = None
    ) -> FailureRecord | None:
        if is_blank(record, field):
            return None
        limit = parse_int_param(rule, param)
        value = record[field]
        text = as_text(value)
        if text is not None and compare(len(text), limit):
            return None
        return fail(field, value, rule, param)

    check.__name__ = f"check_{rule}"
    check.__doc__ = f"Code-point length of the value compared with ``{rule},N``."
    return check


check_max_len = _length_rule("max_len", operator.le)
check_min_len = _length_rule("min_len", operator.ge)
check_exact_len = _length_rule("exact_len", operator.eq)


def _numeric_rule(rule: str, compare: Comparison) -> CheckRoutine:
    def check(
        field: str, record: Mapping[str, Any], param: str | None = None
    ) -> FailureRecord | None:
        if is_blank(record, field):
            return None
        value = record[field]
        number = parse_numeric(value)
        bound = parse_numeric(param)
        # A non-numeric bound is reported as a failure, not a fault
        if number is not None and bound is not None and compare(number, bound):
            return None
        return fail(field, value, rule, param)

    check.__name__ = f"check_{rule}"
    check.__doc__ = f"Numeric value compared with the numeric ``{rule}`` bound."
    return check


check_max_numeric = _numeric_rule("max_numeric", operator.le)
check_min_numeric = _numeric_rule("min_numeric", operator.ge)


def _array_size_rule(rule: str, compare: Comparison) -> CheckRoutine:
    def check(
        field: str, record: Mapping[str, Any], param: str | None = None
    ) -> FailureRecord | None:
        if is_blank(record, field):
            return None
        size = parse_int_param(rule, param)
        value = record[field]
        if isinstance(value, (list, tuple)) and compare(len(value), size):
            return None
        return fail(field, value, rule, param)

    check.__name__ = f"check_{rule}"
    check.__doc__ = f"Element count of a list value compared with ``{rule},N``."
    return check


check_array_size_greater = _array_size_rule("valid_array_size_greater", operator.ge)
check_array_size_lesser = _array_size_rule("valid_array_size_lesser", operator.le)
check_array_size_equal = _array_size_rule("valid_array_size_equal", operator.eq)


def get_limit_rules() -> dict[str, CheckRoutine]:
    """Return length, range and size rule routines keyed by rule name."""
    return {
        "max_len": check_max_len,
        "min_len": check_min_len,
        "exact_len": check_exact_len,
        "max_numeric": check_max_numeric,
        "min_numeric": check_min_numeric,
        "valid_array_size_greater": check_array_size_greater,
        "valid_array_size_lesser": check_array_size_lesser,
        "valid_array_size_equal": check_array_size_equal,
    }
