"""Tests for the project filesystem helpers."""

from pathlib import Path

import pytest

from brickhouse_installer.core.context import STUBS_DIR
from brickhouse_installer.core.files import (
    LiteralReplacement,
    copy_stub,
    delete_matching_files,
    project_exists,
    replace_in_file,
)


def test_project_exists_only_for_directories(tmp_path: Path) -> None:
    (tmp_path / "app").mkdir()
    (tmp_path / "file").write_text("", encoding="utf-8")

    assert project_exists(tmp_path / "app")
    assert not project_exists(tmp_path / "file")
    assert not project_exists(tmp_path / "missing")


def test_replace_in_file_replaces_every_occurrence(tmp_path: Path) -> None:
    path = tmp_path / "app.config.php"
    path.write_text("a: false\nb: false\n", encoding="utf-8")

    found = replace_in_file(path, LiteralReplacement(search="false", replacement="true"))

    assert found
    assert path.read_text(encoding="utf-8") == "a: true\nb: true\n"


def test_replace_in_file_without_marker_leaves_file_alone(tmp_path: Path) -> None:
    path = tmp_path / "app.config.php"
    path.write_text("api_only: true\n", encoding="utf-8")

    found = replace_in_file(path, LiteralReplacement("api_only: false", "api_only: true"))

    assert not found
    assert path.read_text(encoding="utf-8") == "api_only: true\n"


def test_copy_stub_creates_parents_and_overwrites(tmp_path: Path) -> None:
    destination = tmp_path / "tests" / "Unit" / "ExampleTest.php"

    copy_stub(STUBS_DIR, "pest/Unit.php", destination)

    assert destination.read_bytes() == (STUBS_DIR / "pest" / "Unit.php").read_bytes()

    destination.write_text("old", encoding="utf-8")
    copy_stub(STUBS_DIR, "pest/Unit.php", destination)

    assert destination.read_bytes() == (STUBS_DIR / "pest" / "Unit.php").read_bytes()


def test_copy_stub_missing_stub_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        copy_stub(STUBS_DIR, "does-not-exist.php", tmp_path / "out.php")


def test_delete_matching_files_skips_directories(tmp_path: Path) -> None:
    (tmp_path / "a.css").write_text("", encoding="utf-8")
    (tmp_path / "b.js").write_text("", encoding="utf-8")
    (tmp_path / "nested").mkdir()

    deleted = delete_matching_files(tmp_path, "*")

    assert deleted == [tmp_path / "a.css", tmp_path / "b.js"]
    assert [p.name for p in tmp_path.iterdir()] == ["nested"]
