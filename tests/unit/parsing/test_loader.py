"""Tests for rule set and record file loading."""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from fieldcheck.errors import ConfigurationError, MalformedRuleError
from fieldcheck.parsing.loader import frame_to_records, load_records, load_ruleset


def _write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadRuleset:
    def test_loads_and_parses(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "rules.json", {"email": "required|valid_email"})
        ruleset = load_ruleset(path)
        assert [r.name for r in ruleset["email"]] == ["required", "valid_email"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_ruleset(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_ruleset(path)

    def test_non_object(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "rules.json", ["required"])
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_ruleset(path)

    def test_malformed_declaration(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "rules.json", {"name": "required||alpha"})
        with pytest.raises(MalformedRuleError):
            load_ruleset(path)


class TestLoadRecords:
    def test_json_object(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "data.json", {"name": "Ada"})
        assert load_records(path) == [{"name": "Ada"}]

    def test_json_array(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "data.json", [{"a": 1}, {"a": None}])
        assert load_records(path) == [{"a": 1}, {"a": None}]

    def test_json_array_of_scalars_rejected(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "data.json", [1, 2])
        with pytest.raises(ValueError, match="array of objects"):
            load_records(path)

    def test_csv_reads_text(self, tmp_path: Path) -> None:
        path = tmp_path / "data.csv"
        path.write_text("name,age\nAda,036\nBob,\n", encoding="utf-8")
        records = load_records(path)
        assert records == [{"name": "Ada", "age": "036"}, {"name": "Bob", "age": ""}]

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "data.xml"
        path.write_text("<a/>", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported"):
            load_records(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_records(tmp_path / "data.csv")


class TestFrameToRecords:
    def test_nan_becomes_none(self) -> None:
        df = pd.DataFrame({"a": [1.0, float("nan")], "b": ["x", None]})
        records = frame_to_records(df)
        assert records[0] == {"a": 1.0, "b": "x"}
        assert records[1] == {"a": None, "b": None}

    def test_list_cells_are_kept(self) -> None:
        df = pd.DataFrame({"tags": [["a", "b"], []]})
        records = frame_to_records(df)
        assert records[0]["tags"] == ["a", "b"]
        assert records[1]["tags"] == []
