"""
CLI tests for the 'hostsnap collect' command.

Tests snapshot output formats, file output, and replayed readings.
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from hostsnap.cli import main
from hostsnap.exceptions import TelemetrySourceError
from hostsnap.normalizer import collect_snapshot


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Keep host config files and environment out of CLI tests."""
    with patch("hostsnap.config.DEFAULT_CONFIG_PATHS", [tmp_path / "none.yaml"]):
        with patch.dict("os.environ", {}, clear=True):
            yield


@pytest.mark.cli
class TestCliCollect:
    """Test the 'hostsnap collect' command."""

    def test_collect_pretty(self, runner, sample_source):
        """Test the default output renders tables."""
        snapshot = collect_snapshot(sample_source)
        with patch("hostsnap.cli.collect_snapshot", return_value=snapshot) as mock_collect:
            result = runner.invoke(main, ["collect"])

        assert result.exit_code == 0, result.output
        assert "Memory" in result.output
        assert "/dev/sda1" in result.output
        assert "GPU (Edge)" in result.output
        mock_collect.assert_called_once_with(None)

    def test_collect_json(self, runner, sample_source):
        snapshot = collect_snapshot(sample_source)
        with patch("hostsnap.cli.collect_snapshot", return_value=snapshot):
            result = runner.invoke(main, ["collect", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["memory"]["ram_percent"] == 50.0
        assert data["components"] == [{"label": "GPU (Edge)", "temperature": 45.0}]

    def test_collect_output_file(self, runner, sample_source, tmp_path):
        output = tmp_path / "out" / "snapshot.json"
        snapshot = collect_snapshot(sample_source)
        with patch("hostsnap.cli.collect_snapshot", return_value=snapshot):
            result = runner.invoke(main, ["collect", "-o", str(output)])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text())
        assert data["disks"][0]["total_space_gb"] == 500.0

    def test_collect_from_file(self, runner, readings_file):
        """Test raw readings from YAML are normalized."""
        result = runner.invoke(main, ["collect", "-f", "json", "--from-file", str(readings_file)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["system"]["host_name"] == "build-01"
        assert data["memory"]["ram_percent"] == 25.0
        assert data["memory"]["swap_percent"] == 25.0
        assert [c["label"] for c in data["components"]] == ["CPU (Tctl)", "Chipset", "acpitz temp1"]
        assert data["components"][2]["temperature"] is None

    @pytest.mark.parametrize(
        "content",
        [
            "disks: [\n  - {name: /dev/sda1, size: 10}\n",
            "sensors:\n  - label: edge\n    colour: red\n",
            "- just\n- a\n- list\n",
        ],
    )
    def test_collect_from_malformed_file(self, runner, tmp_path, content):
        """Test a malformed readings file exits with status 1 instead of a traceback."""
        path = tmp_path / "bad.yaml"
        path.write_text(content)

        result = runner.invoke(main, ["collect", "--from-file", str(path)])

        assert result.exit_code == 1
        assert "Invalid readings file" in result.output
        assert "Traceback" not in result.output

    def test_collect_from_file_with_nan(self, runner, tmp_path):
        """Test a .nan temperature is written as null."""
        path = tmp_path / "readings.yaml"
        path.write_text("sensors:\n  - label: edge\n    temperature: .nan\n")

        result = runner.invoke(main, ["collect", "-f", "json", "--from-file", str(path)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["components"] == [{"label": "GPU (Edge)", "temperature": None}]

    def test_collect_fatal_error(self, runner):
        """Test an unreachable telemetry subsystem exits with status 1."""
        with patch("hostsnap.cli.collect_snapshot", side_effect=TelemetrySourceError("no /proc")):
            result = runner.invoke(main, ["collect"])

        assert result.exit_code == 1
        assert "Snapshot failed" in result.output

    def test_collect_invalid_format(self, runner):
        result = runner.invoke(main, ["collect", "--format", "xml"])

        assert result.exit_code != 0


@pytest.mark.cli
class TestCliMisc:
    """Test the informational commands."""

    def test_version_option(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "hostsnap" in result.output

    def test_version_command(self, runner):
        result = runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Version Information" in result.output

    def test_labels(self, runner):
        result = runner.invoke(main, ["labels"])

        assert result.exit_code == 0
        assert "CPU (Tctl)" in result.output
        assert "Wi-Fi Module" in result.output

    def test_init_config(self, runner, tmp_path):
        path = tmp_path / "etc" / "config.yaml"
        result = runner.invoke(main, ["init-config", str(path)])

        assert result.exit_code == 0
        assert "port: 7878" in path.read_text()

    def test_init_config_is_loadable(self, runner, tmp_path):
        from hostsnap.config import Config

        path = tmp_path / "config.yaml"
        runner.invoke(main, ["init-config", str(path)])

        config = Config.from_file(path)
        assert config.port == 7878
        assert config.log_level == "INFO"
