"""Tests for the fieldcheck CLI application."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fieldcheck.cli.app import app

runner = CliRunner()

RULES = {
    "name": "required|valid_name",
    "email": "required|valid_email",
    "age": "numeric|min_numeric,18",
}


@pytest.fixture()
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(RULES), encoding="utf-8")
    return path


def _write_records(tmp_path: Path, records: object, name: str = "data.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestVersionCommand:
    def test_version_exits_zero(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "fieldcheck" in result.output


class TestRulesCommand:
    def test_lists_builtin_rules(self) -> None:
        result = runner.invoke(app, ["rules"])
        assert result.exit_code == 0
        assert "required" in result.output
        assert "rules registered" in result.output

    def test_unknown_locale_exits_two(self) -> None:
        result = runner.invoke(app, ["rules", "--locale", "xx"])
        assert result.exit_code == 2
        assert "Error" in result.output


class TestValidateCommand:
    def test_all_valid_exits_zero(self, tmp_path: Path, rules_file: Path) -> None:
        data = _write_records(
            tmp_path, [{"name": "Ada Lovelace", "email": "ada.lovelace@gmail.com", "age": "36"}]
        )
        result = runner.invoke(app, ["validate", str(data), str(rules_file)])
        assert result.exit_code == 0
        assert "Validation Summary" in result.output
        assert "No validation failures found" in result.output

    def test_invalid_record_exits_one(self, tmp_path: Path, rules_file: Path) -> None:
        data = _write_records(
            tmp_path,
            [
                {"name": "Ada Lovelace", "email": "ada.lovelace@gmail.com", "age": "36"},
                {"name": "", "email": "nope", "age": "12"},
            ],
        )
        result = runner.invoke(app, ["validate", str(data), str(rules_file)])
        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "Invalid Records" in result.output

    def test_csv_input(self, tmp_path: Path, rules_file: Path) -> None:
        data = tmp_path / "data.csv"
        data.write_text(
            "name,email,age\nAda Lovelace,ada.lovelace@gmail.com,\nGrace,grace,40\n",
            encoding="utf-8",
        )
        result = runner.invoke(app, ["validate", str(data), str(rules_file), "--json"])
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["total_records"] == 2
        assert payload["invalid_records"] == 1
        assert [row["rule"] for row in payload["rows"]] == ["valid_email"]

    def test_json_output(self, tmp_path: Path, rules_file: Path) -> None:
        data = _write_records(tmp_path, {"name": "R2D2", "email": "r2@gmail.com"})
        result = runner.invoke(app, ["validate", str(data), str(rules_file), "--json"])
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["summary_by_rule"] == {"valid_name": 1}
        message = payload["rows"][0]["message"]
        assert message == "The Name field needs to contain a valid human name"

    def test_markdown_report(self, tmp_path: Path, rules_file: Path) -> None:
        data = _write_records(tmp_path, {"name": "", "email": "x@gmail.com"})
        report_path = tmp_path / "out" / "report.md"
        result = runner.invoke(
            app, ["validate", str(data), str(rules_file), "--markdown", str(report_path)]
        )
        assert result.exit_code == 1
        assert report_path.exists()
        content = report_path.read_text(encoding="utf-8")
        assert "# Validation Report: data.json" in content
        assert "The Name field is required" in content

    def test_spanish_messages(self, tmp_path: Path, rules_file: Path) -> None:
        data = _write_records(tmp_path, {"email": "x@gmail.com"})
        result = runner.invoke(
            app, ["validate", str(data), str(rules_file), "--locale", "es", "--json"]
        )
        payload = json.loads(result.stdout)
        assert payload["rows"][0]["message"] == "El campo Name es obligatorio"

    def test_missing_data_file_exits_two(self, tmp_path: Path, rules_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "none.json"), str(rules_file)])
        assert result.exit_code == 2
        assert "File not found" in result.output

    def test_unknown_rule_exits_two(self, tmp_path: Path) -> None:
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"name": "required|is_awesome"}), encoding="utf-8")
        data = _write_records(tmp_path, {"name": "Ada"})
        result = runner.invoke(app, ["validate", str(data), str(rules)])
        assert result.exit_code == 2
        assert "is_awesome" in result.output

    def test_malformed_rules_exit_two(self, tmp_path: Path) -> None:
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"name": "required||alpha"}), encoding="utf-8")
        data = _write_records(tmp_path, {"name": "Ada"})
        result = runner.invoke(app, ["validate", str(data), str(rules)])
        assert result.exit_code == 2
        assert "Error loading inputs" in result.output

    def test_rule_fault_exits_two(self, tmp_path: Path) -> None:
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"name": "regex,/[a-/"}), encoding="utf-8")
        data = _write_records(tmp_path, {"name": "Ada"})
        result = runner.invoke(app, ["validate", str(data), str(rules)])
        assert result.exit_code == 2
        assert "Validation error" in result.output
