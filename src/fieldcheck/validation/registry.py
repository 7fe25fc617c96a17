"""Registry of check routines keyed by rule name.

A registry is an explicit value: build one with
``RuleRegistry.with_builtins()``, optionally extend it during startup, and
hand it to ``ValidationEngine``. There is no process-wide table, so tests
and hosts can keep isolated registries side by side.

Registration is meant for a single-threaded setup phase; once evaluation
starts the registry is only read.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from loguru import logger

from fieldcheck.errors import MalformedRuleError, UnknownRuleError
from fieldcheck.validation.rules import CheckRoutine, get_builtin_rules


class RuleRegistry:
    """Mapping of rule name to check routine with last-registration-wins overrides."""

    def __init__(self, rules: Mapping[str, CheckRoutine] | None = None) -> None:
        """Initialize the registry.

        Args:
            rules: Optional initial routines; each is registered in order.
        """
        self._rules: dict[str, CheckRoutine] = {}
        for name, routine in (rules or {}).items():
            self.register(name, routine)

    @classmethod
    def with_builtins(cls) -> RuleRegistry:
        """Create a registry pre-populated with every built-in rule."""
        registry = cls(get_builtin_rules())
        logger.debug("Registry initialized with {} built-in rules", len(registry))
        return registry

    def register(self, name: str, routine: CheckRoutine) -> None:
        """Add a rule, replacing any existing routine of the same name.

        Args:
            name: Rule name as used in declarations (``"max_len"``).
            routine: Callable ``(field, record, param) -> FailureRecord | None``.

        Raises:
            MalformedRuleError: If ``name`` is empty or contains ``|`` or ``,``.
            TypeError: If ``routine`` is not callable.
        """
        if not name or "|" in name or "," in name:
            raise MalformedRuleError(name, "rule names must be non-empty without '|' or ','")
        if not callable(routine):
            msg = f"Routine for rule '{name}' must be callable, got {type(routine).__name__}"
            raise TypeError(msg)
        if name in self._rules:
            logger.debug("Overriding validation rule: {}", name)
        self._rules[name] = routine

    def resolve(self, name: str, field: str | None = None) -> CheckRoutine:
        """Return the routine registered for ``name``.

        Raises:
            UnknownRuleError: If no routine is registered under ``name``.
        """
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name, field) from None

    def get(self, name: str) -> CheckRoutine | None:
        """Look up a routine by name, or None if not registered."""
        return self._rules.get(name)

    def names(self) -> list[str]:
        """Return registered rule names, sorted."""
        return sorted(self._rules)

    def copy(self) -> RuleRegistry:
        """Independent registry with the same routines."""
        return RuleRegistry(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
