"""Tests for project name validation and the existence precondition."""

from pathlib import Path

import pytest

from brickhouse_installer.cli.commands.new.validation import (
    ALREADY_EXISTS_MESSAGE,
    INVALID_NAME_MESSAGE,
    NAME_REQUIRED_MESSAGE,
    ensure_project_absent,
    project_name_error,
)


@pytest.mark.parametrize("name", ["app", "example-app", "my_app", "App2", "-", "_x_"])
def test_valid_names_are_accepted(tmp_path: Path, name: str) -> None:
    assert project_name_error(name, cwd=tmp_path, force=False) is None


@pytest.mark.parametrize(
    "name", ["my app", "app!", "../app", "a/b", "app.v2", "ärger", "app\n"]
)
def test_invalid_names_are_rejected(tmp_path: Path, name: str) -> None:
    assert project_name_error(name, cwd=tmp_path, force=False) == INVALID_NAME_MESSAGE


def test_empty_name_is_required(tmp_path: Path) -> None:
    assert project_name_error("", cwd=tmp_path, force=False) == NAME_REQUIRED_MESSAGE


def test_existing_directory_rejected_without_force(tmp_path: Path) -> None:
    (tmp_path / "app").mkdir()

    assert project_name_error("app", cwd=tmp_path, force=False) == ALREADY_EXISTS_MESSAGE


def test_existing_directory_allowed_with_force(tmp_path: Path) -> None:
    (tmp_path / "app").mkdir()

    assert project_name_error("app", cwd=tmp_path, force=True) is None


def test_ensure_project_absent_exits_1_when_directory_exists(tmp_path: Path) -> None:
    (tmp_path / "app").mkdir()

    with pytest.raises(SystemExit) as exc_info:
        ensure_project_absent(tmp_path / "app", force=False)

    assert exc_info.value.code == 1


def test_ensure_project_absent_never_blocks_with_force(tmp_path: Path) -> None:
    (tmp_path / "app").mkdir()

    ensure_project_absent(tmp_path / "app", force=True)
    ensure_project_absent(tmp_path / "missing", force=True)
