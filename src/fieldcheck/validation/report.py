"""Validation report model.

Aggregates the ValidationResults of a batch of records into a structured
report with record counts, per-field and per-rule failure breakdowns and a
pass rate. Supports Markdown export and a pandas DataFrame with one row per
failure.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pandas as pd
from pydantic import BaseModel, Field

from fieldcheck.models.results import ValidationResult
from fieldcheck.validation.messages import MessageCatalog


class FailureRow(BaseModel):
    """One failure flattened for tabular output."""

    record_index: int = Field(..., description="Zero-based index of the record in the batch")
    field: str = Field(..., description="Failing field")
    rule: str = Field(..., description="Failing rule")
    value: Any = Field(default=None, description="Offending value")
    param: Any = Field(default=None, description="Rule parameter")
    message: str = Field(..., description="Rendered message")


class ValidationReport(BaseModel):
    """Aggregated validation outcome for a batch of records."""

    source: str = Field(default="", description="Where the records came from")
    total_records: int = Field(default=0, description="Number of records validated")
    invalid_records: int = Field(default=0, description="Records with at least one failure")
    failure_count: int = Field(default=0, description="Total number of failures")
    pass_rate: float = Field(
        default=1.0, description="Fraction of records with zero failures (0.0 to 1.0)"
    )
    rows: list[FailureRow] = Field(default_factory=list, description="Every failure, flattened")
    summary_by_field: dict[str, int] = Field(
        default_factory=dict, description="Field -> failure count"
    )
    summary_by_rule: dict[str, int] = Field(
        default_factory=dict, description="Rule -> failure count"
    )
    generated_at: str = Field(default="", description="ISO 8601 timestamp of report generation")

    @property
    def all_valid(self) -> bool:
        return self.invalid_records == 0

    @classmethod
    def from_results(
        cls,
        results: list[ValidationResult],
        messages: MessageCatalog,
        *,
        source: str = "",
    ) -> ValidationReport:
        """Create a ValidationReport by computing summaries from raw results.

        Args:
            results: One ValidationResult per record, in record order.
            messages: Catalog used to render each failure.
            source: Optional label for the data source (e.g. a file name).
        """
        rows: list[FailureRow] = []
        summary_by_field: dict[str, int] = {}
        summary_by_rule: dict[str, int] = {}

        for index, result in enumerate(results):
            for failure in result.failures:
                rows.append(
                    FailureRow(
                        record_index=index,
                        field=failure.field,
                        rule=failure.rule,
                        value=failure.value,
                        param=failure.param,
                        message=messages.render(failure),
                    )
                )
                summary_by_field[failure.field] = summary_by_field.get(failure.field, 0) + 1
                summary_by_rule[failure.rule] = summary_by_rule.get(failure.rule, 0) + 1

        invalid = sum(1 for r in results if not r.is_valid)
        pass_rate = (len(results) - invalid) / len(results) if results else 1.0

        return cls(
            source=source,
            total_records=len(results),
            invalid_records=invalid,
            failure_count=len(rows),
            pass_rate=pass_rate,
            rows=rows,
            summary_by_field=summary_by_field,
            summary_by_rule=summary_by_rule,
            generated_at=datetime.now(tz=UTC).isoformat(),
        )

    def to_dataframe(self) -> pd.DataFrame:
        """One row per failure with record_index, field, rule, value, param, message."""
        columns = ["record_index", "field", "rule", "value", "param", "message"]
        return pd.DataFrame([row.model_dump() for row in self.rows], columns=columns)

    def to_markdown(self) -> str:
        """Render the report as a Markdown document."""
        lines: list[str] = []

        title = f"# Validation Report: {self.source}" if self.source else "# Validation Report"
        lines.append(title)
        lines.append("")
        lines.append(f"**Generated:** {self.generated_at}")
        lines.append("")

        lines.append("## Summary")
        lines.append("")
        lines.append("| Metric | Value |")
        lines.append("|--------|-------|")
        lines.append(f"| Records Validated | {self.total_records} |")
        lines.append(f"| Invalid Records | {self.invalid_records} |")
        lines.append(f"| Failures | {self.failure_count} |")
        lines.append(f"| Pass Rate | {self.pass_rate:.0%} |")
        lines.append("")

        if self.summary_by_field:
            lines.append("## Failures by Field")
            lines.append("")
            lines.append("| Field | Failures |")
            lines.append("|-------|----------|")
            for field, count in sorted(self.summary_by_field.items(), key=lambda kv: -kv[1]):
                lines.append(f"| {field} | {count} |")
            lines.append("")

        if self.summary_by_rule:
            lines.append("## Failures by Rule")
            lines.append("")
            lines.append("| Rule | Failures |")
            lines.append("|------|----------|")
            for rule, count in sorted(self.summary_by_rule.items(), key=lambda kv: -kv[1]):
                lines.append(f"| {rule} | {count} |")
            lines.append("")

        if self.rows:
            lines.append("## Failures")
            lines.append("")
            lines.append("| # | Record | Field | Rule | Message |")
            lines.append("|---|--------|-------|------|---------|")
            for i, row in enumerate(self.rows, 1):
                lines.append(
                    f"| {i} | {row.record_index} | {row.field} | {row.rule} | {row.message} |"
                )
            lines.append("")
        else:
            lines.append("**All records passed validation.**")
            lines.append("")

        return "\n".join(lines)
