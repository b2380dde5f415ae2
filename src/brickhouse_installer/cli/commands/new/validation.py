"""Validation logic for the new command.

Name validation returns an error message (or None) so the prompt loop can
show it and ask again. ensure_project_absent() is the hard stop before the
build starts.
"""

import re
from pathlib import Path

import click

from brickhouse_installer.cli.output import user_output
from brickhouse_installer.core.files import project_exists

PROJECT_NAME_PATTERN = re.compile(r"^[\w-]+$", re.ASCII)

NAME_REQUIRED_MESSAGE = "Project name is required."
INVALID_NAME_MESSAGE = "The name may only contain letters, numbers, dashes and underscores."
ALREADY_EXISTS_MESSAGE = "Application already exists."


def project_name_error(name: str, *, cwd: Path, force: bool) -> str | None:
    """Check a proposed project name.

    Args:
        name: Proposed directory name
        cwd: Directory the project would be created in
        force: Whether an existing directory may be replaced

    Returns:
        A user-facing error message, or None if the name is acceptable
    """
    if not name:
        return NAME_REQUIRED_MESSAGE

    if PROJECT_NAME_PATTERN.fullmatch(name) is None:
        return INVALID_NAME_MESSAGE

    if not force and project_exists(cwd / name):
        return ALREADY_EXISTS_MESSAGE

    return None


def ensure_project_absent(project_path: Path, *, force: bool) -> None:
    """Refuse to build over an existing directory unless forced.

    Raises:
        SystemExit: With exit code 1 if the directory exists and force is False
    """
    if not force and project_exists(project_path):
        user_output(click.style("Error: ", fg="red") + ALREADY_EXISTS_MESSAGE)
        raise SystemExit(1)
