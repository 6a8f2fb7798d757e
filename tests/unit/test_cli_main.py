"""Tests for dyadic_trust.cli.main — CLI commands via Click test runner."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dyadic_trust.cli.main import cli


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def antecedent_file(tmp_path: Path) -> Path:
    path = tmp_path / "antecedents.json"
    path.write_text(
        json.dumps(
            [
                {
                    "timestamp": "2024-01-01T00:00:00+00:00",
                    "antecedent_type": "integrity",
                    "direction": "positive",
                    "magnitude": 0.5,
                },
                {
                    "timestamp": "2024-01-01T00:00:00+00:00",
                    "antecedent_type": "ability",
                    "direction": "positive",
                    "magnitude": 0.5,
                    "life_domain": "financial",
                },
            ]
        ),
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# Root CLI
# ---------------------------------------------------------------------------


class TestRootCLI:
    def test_help_exits_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "decide" in result.output

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "dyadic-trust" in result.output.lower()

    def test_log_level_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "debug", "version"])
        assert result.exit_code == 0

    def test_stages_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["stages"])
        assert result.exit_code == 0
        for label in ("Stranger", "Acquaintance", "Established", "Intimate", "Estranged"):
            assert label in result.output


# ---------------------------------------------------------------------------
# decide
# ---------------------------------------------------------------------------


class TestDecideCommand:
    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decide"])
        assert result.exit_code == 0
        assert "Task willingness" in result.output

    def test_json_defaults(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decide", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["task_willingness"] == pytest.approx(0.02)
        assert data["decision_certainty"] == pytest.approx(0.07)

    def test_json_with_options(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "decide",
                "--stage", "established",
                "--integrity", "0.9",
                "--propensity", "0.5",
                "--stakes", "low",
                "--history", "1.0",
                "--json",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["disclosure_willingness"] == pytest.approx(0.67)
        assert data["decision_certainty"] == pytest.approx(0.72)

    def test_multiplier(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decide", "--stakes", "low", "-m", "2.0", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["task_willingness"] == pytest.approx(0.54)

    def test_invalid_stage_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decide", "--stage", "soulmate"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# replay
# ---------------------------------------------------------------------------


class TestReplayCommand:
    def test_json_output(self, runner: CliRunner, antecedent_file: Path) -> None:
        result = runner.invoke(cli, ["replay", str(antecedent_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["antecedents"] == 2
        assert data["integrity"] == pytest.approx(0.5)
        assert data["benevolence"] == pytest.approx(0.3)
        assert data["competence"]["financial"] == pytest.approx(0.5)
        assert data["competence"]["work"] == pytest.approx(0.3)

    def test_table_output(self, runner: CliRunner, antecedent_file: Path) -> None:
        result = runner.invoke(cli, ["replay", str(antecedent_file)])
        assert result.exit_code == 0
        assert "Integrity" in result.output
        assert "Overall" in result.output

    def test_invalid_json_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["replay", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_non_list_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"timestamp": "2024-01-01"}), encoding="utf-8")
        result = runner.invoke(cli, ["replay", str(path)])
        assert result.exit_code == 1

    def test_bad_entry_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"antecedent_type": "ability"}]), encoding="utf-8")
        result = runner.invoke(cli, ["replay", str(path)])
        assert result.exit_code == 1

    def test_missing_file_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["replay", str(tmp_path / "absent.json")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# predict
# ---------------------------------------------------------------------------


class TestPredictCommand:
    def test_trusting_stranger_confides_at_no_risk(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["predict", "-p", "0.9", "--integrity", "1.0", "--risk-level", "0.0"]
        )
        assert result.exit_code == 0
        assert "Would confide: yes" in result.output
        assert "Would help:    no" in result.output

    def test_full_risk_refuses(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["predict", "-p", "0.9", "--integrity", "1.0", "--risk-level", "1.0"]
        )
        assert result.exit_code == 0
        assert "Would confide: no" in result.output
