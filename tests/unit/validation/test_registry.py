"""Tests for RuleRegistry registration, lookup and isolation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from fieldcheck.errors import MalformedRuleError, UnknownRuleError
from fieldcheck.models.results import FailureRecord
from fieldcheck.validation.registry import RuleRegistry
from fieldcheck.validation.rules import get_builtin_rules


def _always_pass(field: str, record: Mapping[str, Any], param: str | None) -> FailureRecord | None:
    return None


def _always_fail(field: str, record: Mapping[str, Any], param: str | None) -> FailureRecord | None:
    return FailureRecord(field=field, value=record.get(field), rule="always_fail", param=param)


class TestBuiltins:
    def test_with_builtins_has_every_rule(self) -> None:
        registry = RuleRegistry.with_builtins()
        assert len(registry) == len(get_builtin_rules())
        for name in ("required", "max_len", "valid_email", "iban", "equalsfield", "extension"):
            assert name in registry

    def test_names_sorted(self) -> None:
        names = RuleRegistry.with_builtins().names()
        assert names == sorted(names)
        assert list(RuleRegistry.with_builtins()) == names

    def test_empty_registry(self) -> None:
        registry = RuleRegistry()
        assert len(registry) == 0
        assert "required" not in registry


class TestRegister:
    def test_register_and_resolve(self) -> None:
        registry = RuleRegistry()
        registry.register("always_pass", _always_pass)
        assert registry.resolve("always_pass") is _always_pass

    def test_override_replaces(self) -> None:
        registry = RuleRegistry.with_builtins()
        registry.register("required", _always_pass)
        assert registry.resolve("required") is _always_pass

    @pytest.mark.parametrize("name", ["", "a|b", "a,b"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(MalformedRuleError):
            RuleRegistry().register(name, _always_pass)

    def test_non_callable(self) -> None:
        with pytest.raises(TypeError, match="must be callable"):
            RuleRegistry().register("broken", "not a function")  # type: ignore[arg-type]

    def test_initial_rules(self) -> None:
        registry = RuleRegistry({"always_pass": _always_pass, "always_fail": _always_fail})
        assert registry.names() == ["always_fail", "always_pass"]


class TestResolve:
    def test_unknown_rule(self) -> None:
        with pytest.raises(UnknownRuleError) as exc_info:
            RuleRegistry.with_builtins().resolve("no_such_rule", "email")
        assert exc_info.value.rule == "no_such_rule"
        assert exc_info.value.field == "email"
        assert "no_such_rule" in str(exc_info.value)

    def test_get_returns_none(self) -> None:
        assert RuleRegistry().get("required") is None


class TestIsolation:
    def test_registries_are_independent(self) -> None:
        first = RuleRegistry.with_builtins()
        second = RuleRegistry.with_builtins()
        first.register("custom", _always_pass)
        assert "custom" in first
        assert "custom" not in second

    def test_copy_is_independent(self) -> None:
        original = RuleRegistry.with_builtins()
        clone = original.copy()
        clone.register("custom", _always_pass)
        assert "custom" not in original
        assert len(clone) == len(original) + 1
