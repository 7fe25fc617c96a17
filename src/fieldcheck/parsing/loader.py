"""Load rule sets and records from files.

Usage:
    from fieldcheck.parsing.loader import load_records, load_ruleset

    ruleset = load_ruleset(Path("signup_rules.json"))
    records = load_records(Path("signups.csv"))
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
from loguru import logger

from fieldcheck.errors import ConfigurationError
from fieldcheck.models.rules import RuleSet
from fieldcheck.parsing.rule_parser import parse_ruleset


def load_ruleset(path: Path) -> RuleSet:
    """Read a JSON object of ``field -> declaration`` and parse it.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the JSON is not an object or a declaration
            is malformed.
    """
    if not path.exists():
        msg = f"Rule set file not found: {path}"
        raise FileNotFoundError(msg)

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            msg = f"Rule set file {path} is not valid JSON: {exc}"
            raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Rule set file {path} must contain a JSON object"
        raise ConfigurationError(msg)

    ruleset = parse_ruleset(data)
    logger.debug("Loaded rule set for {} fields from {}", len(ruleset), path)
    return ruleset


def frame_to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert DataFrame rows to record dicts, turning NaN/NA cells into None."""
    records: list[dict[str, Any]] = []
    for row in df.to_dict(orient="records"):
        records.append(
            {str(key): (None if _is_missing(value) else value) for key, value in row.items()}
        )
    return records


def _is_missing(value: Any) -> bool:
    if isinstance(value, (list, tuple, dict)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def load_records(path: Path) -> list[dict[str, Any]]:
    """Read records from a ``.json`` or ``.csv`` file.

    JSON files may hold a single object or an array of objects. CSV cells
    are read as text; empty cells become empty strings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: For unsupported suffixes or JSON that is not object(s).
    """
    if not path.exists():
        msg = f"Data file not found: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        logger.debug("Read {} rows from {}", len(df), path)
        return frame_to_records(df)

    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            return [data]
        if isinstance(data, list) and all(isinstance(item, dict) for item in data):
            return data
        msg = f"{path} must contain a JSON object or an array of objects"
        raise ValueError(msg)

    msg = f"Unsupported data file type '{suffix}' (expected .json or .csv)"
    raise ValueError(msg)
