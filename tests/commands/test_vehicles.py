"""Tests for the vehicle commands (add, preset, list, show, needs-fuel, running)."""

from __future__ import annotations

import json
import uuid
from pathlib import Path

import pytest
from click.testing import CliRunner

from fleetctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestAddCommand:
    def test_add_car(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "car", "Ford", "Mustang", "--color", "Red"])
        assert result.exit_code == 0
        assert "create_vehicle" in result.output
        assert "Ford Mustang (car)" in result.output

    def test_add_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "add", "motorcycle", "Honda", "CB500", "--capacity", "4.5", "--year", "2021"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["tires"] == 2
        assert data["data"]["fuel_capacity"] == 4.5
        assert data["data"]["year"] == 2021
        assert data["data"]["color"] == "White"
        uuid.UUID(data["data"]["id"])

    def test_add_quiet_prints_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "add", "car", "Ford", "Focus"])
        assert result.exit_code == 0
        uuid.UUID(result.stdout.strip())

    def test_unknown_kind_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "truck", "Volvo", "FH16"])
        assert result.exit_code == 2

    def test_invalid_attributes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "add", "car", " ", "Mustang"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_ARGUMENT"
        assert payload["op"] == "create_vehicle"

    def test_config_defaults_apply(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fleetctl.toml").write_text('[defaults]\ncolor = "Silver"\nyear = 2010\n')
        result = cli_runner.invoke(cli, ["--json", "add", "car", "Ford", "Focus"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert (data["color"], data["year"]) == ("Silver", 2010)

    def test_explicit_config_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "other.toml"
        config.write_text('[defaults]\ncolor = "Green"\n')
        result = cli_runner.invoke(
            cli, ["--json", "-c", str(config), "add", "car", "Ford", "Focus"]
        )
        assert json.loads(result.stdout)["data"]["color"] == "Green"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "--examples"])
        assert result.exit_code == 0
        assert "fleetctl add car Ford Mustang" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestPresetCommand:
    def test_builtin_preset(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "preset", "explorer"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert (data["brand"], data["model"], data["color"]) == ("Ford", "Explorer", "Black")

    def test_unknown_preset(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "preset", "delorean"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["detail"]["available"] == ["explorer", "mustang"]

    def test_list_presets(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "preset", "--list"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["explorer", "mustang"]

    def test_no_name_lists(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["preset"])
        assert result.exit_code == 0
        assert "list_presets" in result.output

    def test_configured_preset(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fleetctl.toml").write_text(
            '[presets.scooter]\nkind = "motorcycle"\nbrand = "Vespa"\nmodel = "Primavera"\n'
        )
        result = cli_runner.invoke(cli, ["--json", "preset", "scooter"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["tires"] == 2
        assert data["preset"] == "scooter"


@pytest.mark.usefixtures("_isolated_cwd")
class TestQueryCommands:
    def test_list_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "No vehicles." in result.output

    def test_list_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert json.loads(result.stdout)["data"] == {"items": [], "count": 0}

    @pytest.mark.parametrize("command", ["show", "needs-fuel", "running"])
    def test_unknown_id(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, ["--json", command, str(uuid.uuid4())])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "NOT_FOUND"
        assert payload["error"]["message"] == "Vehicle not found."

    def test_malformed_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "not-an-id"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_ARGUMENT"

    def test_error_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", str(uuid.uuid4())])
        assert result.exit_code == 1
        assert "ERROR  get_vehicle — Vehicle not found." in result.stderr
