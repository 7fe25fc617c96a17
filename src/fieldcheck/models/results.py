"""Failure and result models produced by the evaluation engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FailureRecord(BaseModel):
    """Structured description of one failing (field, rule) evaluation.

    ``param`` is whatever the routine found most useful for rendering a
    message: the raw parameter text for most rules, the parsed token list
    for list-membership rules.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field: str = Field(..., description="Field name that failed")
    value: Any = Field(default=None, description="Offending value (None for 'required')")
    rule: str = Field(..., description="Rule name that failed")
    param: Any = Field(default=None, description="Raw or parsed rule parameter")


class ValidationResult(BaseModel):
    """Outcome of evaluating one record against one rule set.

    An empty ``failures`` list is the Valid outcome; otherwise the result is
    Invalid and lists every failure in field/rule declaration order.
    """

    failures: list[FailureRecord] = Field(
        default_factory=list, description="All failures in declaration order"
    )

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(failures=[])

    @property
    def is_valid(self) -> bool:
        return not self.failures

    def __bool__(self) -> bool:
        return self.is_valid

    def fields(self) -> list[str]:
        """Failing field names, first-failure order, without duplicates."""
        seen: dict[str, None] = {}
        for failure in self.failures:
            seen.setdefault(failure.field, None)
        return list(seen)

    def by_field(self) -> dict[str, list[FailureRecord]]:
        """Group failures by field, preserving declaration order."""
        grouped: dict[str, list[FailureRecord]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field, []).append(failure)
        return grouped
