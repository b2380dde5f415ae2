"""Tests for the top-level `brickhouse` group."""

import pytest
from click.testing import CliRunner

from brickhouse_installer.cli import cli as cli_module
from brickhouse_installer.cli.cli import cli


def test_new_is_registered() -> None:
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "new" in result.output


def test_new_help_lists_options() -> None:
    result = CliRunner().invoke(cli, ["new", "-h"])

    assert result.exit_code == 0
    for option in ("--force", "--quiet", "--git", "--api", "--pest", "--no-interaction"):
        assert option in result.output


def test_malformed_global_config_exits_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_context():
        raise ValueError("Invalid TOML in /home/user/.brickhouse/config.toml")

    monkeypatch.setattr(cli_module, "create_context", broken_context)

    result = CliRunner().invoke(cli, ["new", "myapp"])

    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
