"""Validation engine orchestrator.

Resolves each declared rule through a RuleRegistry, runs the check
routines field by field, and collects every failure into a
ValidationResult. Rendering of failures into messages is delegated to a
MessageCatalog.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import pandas as pd
from loguru import logger

from fieldcheck.errors import RoutineFault
from fieldcheck.models.results import FailureRecord, ValidationResult
from fieldcheck.models.rules import RuleSet
from fieldcheck.parsing.loader import frame_to_records
from fieldcheck.parsing.rule_parser import parse_ruleset
from fieldcheck.validation.messages import MessageCatalog
from fieldcheck.validation.registry import RuleRegistry
from fieldcheck.validation.rules import CheckRoutine

RuleSetLike = RuleSet | Mapping[str, Any]


class ValidationEngine:
    """Evaluates flat records against declarative rule sets.

    The engine holds a registry of check routines and a message catalog.
    ``evaluate`` keeps no state between calls, so one engine can serve
    concurrent callers once registration is finished.
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        *,
        messages: MessageCatalog | None = None,
    ) -> None:
        """Initialize the validation engine.

        Args:
            registry: Rule registry to resolve names against. Defaults to a
                fresh registry of the built-in rules.
            messages: Message catalog for rendering. Defaults to English.
        """
        self._registry = registry if registry is not None else RuleRegistry.with_builtins()
        self._messages = messages if messages is not None else MessageCatalog.load()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def messages(self) -> MessageCatalog:
        return self._messages

    def register(self, name: str, routine: CheckRoutine) -> None:
        """Register or override a rule on this engine's registry."""
        self._registry.register(name, routine)
        logger.debug("Registered validation rule: {}", name)

    def set_message(self, name: str, template: str) -> None:
        """Set the message template used when ``name`` fails."""
        self._messages.set_message(name, template)

    def _resolve_all(self, ruleset: RuleSet) -> list[tuple[str, str, CheckRoutine, str | None]]:
        """Resolve every invocation up front so unknown rules fail before any check runs."""
        plan: list[tuple[str, str, CheckRoutine, str | None]] = []
        for field, invocations in ruleset.items():
            for invocation in invocations:
                routine = self._registry.resolve(invocation.name, field)
                plan.append((field, invocation.name, routine, invocation.raw_param))
        return plan

    def evaluate(self, record: Mapping[str, Any], ruleset: RuleSetLike) -> ValidationResult:
        """Evaluate one record against a rule set.

        Args:
            record: Mapping of field name to value. Not modified.
            ruleset: A parsed RuleSet, or a mapping of field name to rule
                declaration string/list (parsed on the fly).

        Returns:
            ValidationResult listing every failure in field/rule declaration order.

        Raises:
            MalformedRuleError: If a declaration cannot be parsed.
            UnknownRuleError: If a rule name is not registered.
            RoutineFault: If a check routine raises.
        """
        parsed = parse_ruleset(ruleset)
        plan = self._resolve_all(parsed)
        view = MappingProxyType(dict(record))

        failures: list[FailureRecord] = []
        for field, rule, routine, raw_param in plan:
            try:
                failure = routine(field, view, raw_param)
            except Exception as exc:
                logger.error("Rule {} failed on field {}: {}", rule, field, exc)
                raise RoutineFault(field, rule, exc) from exc
            if failure is not None:
                failures.append(failure)

        logger.debug(
            "Evaluated {} rules over {} fields: {} failure(s)",
            len(plan),
            len(parsed),
            len(failures),
        )
        return ValidationResult(failures=failures)

    def is_valid(self, record: Mapping[str, Any], ruleset: RuleSetLike) -> bool:
        """Shorthand for ``evaluate(record, ruleset).is_valid``."""
        return self.evaluate(record, ruleset).is_valid

    def validate_frame(self, df: pd.DataFrame, ruleset: RuleSetLike) -> list[ValidationResult]:
        """Evaluate every DataFrame row as a record.

        NaN/NA cells are treated as absent values.

        Returns:
            One ValidationResult per row, in row order.
        """
        parsed = parse_ruleset(ruleset)
        records = frame_to_records(df)
        logger.info(
            "Validating {} records against {} fields ({} rules)",
            len(records),
            len(parsed),
            sum(len(invocations) for invocations in parsed.values()),
        )
        return [self.evaluate(record, parsed) for record in records]

    def render_one(self, failure: FailureRecord) -> str:
        return self._messages.render(failure)

    def render(self, failures: list[FailureRecord]) -> list[str]:
        """Render failures into messages, in order."""
        return self._messages.render_all(failures)
