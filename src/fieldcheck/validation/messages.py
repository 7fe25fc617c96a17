"""Human-readable messages for failure records.

Templates are keyed by rule name and use ``{field}`` and ``{param}``
placeholders. Catalogs are bundled per locale as JSON next to this module
(``locales/en.json``) and can be overridden one rule at a time with
``set_message``. Literal braces must be doubled (``{{`` and ``}}``); a
template that still cannot be formatted renders with the catalog default.
Rendering never affects evaluation.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from fieldcheck.errors import ConfigurationError
from fieldcheck.models.results import FailureRecord

_LOCALES_DIR = Path(__file__).parent / "locales"
DEFAULT_LOCALE = "en"
_FALLBACK_TEMPLATE = "The {field} field is invalid"


class _KeepUnknown(dict[str, str]):
    """format_map helper that leaves unknown placeholders untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def default_label(field: str) -> str:
    """``password_confirm`` -> ``Password Confirm``."""
    return field.replace("_", " ").replace("-", " ").title()


def format_param(param: Any) -> str:
    if param is None:
        return ""
    if isinstance(param, (list, tuple)):
        return ", ".join(str(item) for item in param)
    return str(param)


class MessageCatalog:
    """Message templates for one locale plus optional field labels."""

    def __init__(
        self,
        templates: dict[str, str] | None = None,
        *,
        default: str = _FALLBACK_TEMPLATE,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._templates: dict[str, str] = dict(templates or {})
        self._default = default
        self._labels: dict[str, str] = {}
        self.locale = locale

    @classmethod
    def load(cls, locale: str = DEFAULT_LOCALE) -> MessageCatalog:
        """Load a bundled catalog, e.g. ``MessageCatalog.load("es")``.

        Raises:
            ConfigurationError: If no catalog is bundled for ``locale``.
        """
        path = _LOCALES_DIR / f"{locale}.json"
        if not path.exists():
            available = ", ".join(available_locales())
            msg = f"No message catalog for locale '{locale}' (available: {available})"
            raise ConfigurationError(msg)
        return cls.from_file(path)

    @classmethod
    def from_file(cls, path: Path) -> MessageCatalog:
        """Load a catalog from a JSON file with ``messages`` and ``default`` keys."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        messages = data.get("messages", {})
        if not isinstance(messages, dict):
            msg = f"Message catalog {path} must map rule names to templates"
            raise ConfigurationError(msg)

        catalog = cls(
            {str(k): str(v) for k, v in messages.items()},
            default=data.get("default", _FALLBACK_TEMPLATE),
            locale=data.get("locale", path.stem),
        )
        logger.debug("Loaded {} message templates from {}", len(messages), path)
        return catalog

    @property
    def templates(self) -> dict[str, str]:
        return dict(self._templates)

    def set_message(self, rule: str, template: str) -> None:
        """Add or replace the template for ``rule``."""
        self._templates[rule] = template

    def set_field_label(self, field: str, label: str) -> None:
        """Use ``label`` instead of the derived name when rendering ``field``."""
        self._labels[field] = label

    def label_for(self, field: str) -> str:
        return self._labels.get(field, default_label(field))

    def template_for(self, rule: str) -> str:
        """Template for ``rule``, or the catalog's generic invalid-field template."""
        return self._templates.get(rule, self._default)

    def render(self, failure: FailureRecord) -> str:
        """Render one failure into a message."""
        values = _KeepUnknown(
            field=self.label_for(failure.field),
            param=format_param(failure.param),
        )
        template = self.template_for(failure.rule)
        try:
            return template.format_map(values)
        except (ValueError, IndexError):
            logger.warning(
                "Template for rule {} cannot be formatted, using default: {!r}",
                failure.rule,
                template,
            )
            return self._default.format_map(values)

    def render_all(self, failures: Iterable[FailureRecord]) -> list[str]:
        """Render failures in order."""
        return [self.render(failure) for failure in failures]

    def render_by_field(self, failures: Iterable[FailureRecord]) -> dict[str, list[str]]:
        """Rendered messages grouped by field, in first-failure order."""
        grouped: dict[str, list[str]] = {}
        for failure in failures:
            grouped.setdefault(failure.field, []).append(self.render(failure))
        return grouped


def available_locales() -> list[str]:
    """Locales with a bundled catalog."""
    return sorted(p.stem for p in _LOCALES_DIR.glob("*.json"))
