"""Tests for sequencing and exit codes of the whole build pipeline."""

from pathlib import Path

from brickhouse_installer.cli.commands.new.pipeline import build_project
from brickhouse_installer.core.context import InstallerContext
from tests.fakes.process import FakeProcessRunner
from tests.test_utils.configs import build_config
from tests.test_utils.skeleton import skeleton_on_run


def test_materialize_failure_skips_every_later_stage(tmp_path: Path) -> None:
    process = FakeProcessRunner(exit_codes={("composer", "create-project"): 2})
    ctx = InstallerContext.for_test(process=process, cwd=tmp_path)
    config = build_config(use_pest=True, initialize_git=True)

    exit_code = build_project(ctx, config)

    assert exit_code == 2
    assert len(process.commands) == 1
    assert process.commands[0][:2] == ("composer", "create-project")


def test_success_runs_all_stages(tmp_path: Path) -> None:
    process = FakeProcessRunner(on_run=skeleton_on_run(tmp_path))
    ctx = InstallerContext.for_test(process=process, cwd=tmp_path)
    config = build_config(use_pest=True, initialize_git=True)

    exit_code = build_project(ctx, config)

    assert exit_code == 0
    programs = [args[:2] for args in process.commands]
    assert programs[0] == ("composer", "create-project")
    assert ("npm", "install") in programs
    assert ("php", "brickhouse") in programs
    assert programs[-1] == ("git", "branch")


def test_shaping_failure_is_returned_after_later_steps_run(tmp_path: Path) -> None:
    process = FakeProcessRunner(
        exit_codes={("npm", "install"): 9},
        on_run=skeleton_on_run(tmp_path),
    )
    ctx = InstallerContext.for_test(process=process, cwd=tmp_path)

    exit_code = build_project(ctx, build_config(initialize_git=True))

    assert exit_code == 9
    assert ("php", "brickhouse", "build") in process.commands
    assert process.commands[-1][:2] == ("git", "branch")


def test_git_failure_is_returned(tmp_path: Path) -> None:
    process = FakeProcessRunner(
        exit_codes={("git", "init"): 1},
        on_run=skeleton_on_run(tmp_path),
    )
    ctx = InstallerContext.for_test(process=process, cwd=tmp_path)

    exit_code = build_project(ctx, build_config(initialize_git=True))

    assert exit_code == 1
    assert ("git", "add", ".") not in process.commands


def test_git_stage_skipped_when_disabled(tmp_path: Path) -> None:
    process = FakeProcessRunner(on_run=skeleton_on_run(tmp_path))
    ctx = InstallerContext.for_test(process=process, cwd=tmp_path)

    build_project(ctx, build_config(initialize_git=False))

    assert not any(args[0] == "git" for args in process.commands)
