"""Tests for the version command and top-level help."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from seekaur.cli.cli import cli
from seekaur.core.context import SeekaurContext


def test_version_prints_static_string() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["version"], obj=SeekaurContext.for_test())

    assert result.exit_code == 0
    assert result.output == "seekaur v1.0.0\n"


def test_help_lists_commands() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"], obj=SeekaurContext.for_test())

    assert result.exit_code == 0
    for command in ("search", "info", "tarball", "pkgbuild", "version"):
        assert command in result.output


def test_malformed_config_exits_non_zero(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("aur_url = ", encoding="utf-8")
    monkeypatch.setenv("SEEKAUR_CONFIG", str(config_path))
    runner = CliRunner()

    # No obj: the group builds the production context itself
    result = runner.invoke(cli, ["version"])

    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
