"""Resolving user choices from flags, falling back to interactive prompts.

Each resolver returns the explicit flag value untouched when one was given
(including an explicit False from a --no-* flag) and only prompts when the
flag was left unset. With interactive=False the documented default applies.
"""

import logging
from pathlib import Path

import click

from brickhouse_installer.cli.output import user_output
from brickhouse_installer.core.context import InstallerContext

from .validation import NAME_REQUIRED_MESSAGE, project_name_error

logger = logging.getLogger(__name__)

PEST = "Pest"
PHPUNIT = "PHPUnit"


def resolve_directory(
    directory: str | None, *, cwd: Path, force: bool, interactive: bool
) -> str:
    """Return the project directory name, asking for it if needed.

    A name given on the command line must match the name rules. The prompt
    re-asks until the name is valid and, unless forced, not already taken.

    Raises:
        SystemExit: If the given name is invalid, or no name was given and
            prompting is disabled
    """
    if directory:
        # Existence is checked separately so --force can still replace it
        error = project_name_error(directory, cwd=cwd, force=True)
        if error is not None:
            user_output(click.style("Error: ", fg="red") + error)
            raise SystemExit(1)
        return directory

    if not interactive:
        user_output(click.style("Error: ", fg="red") + NAME_REQUIRED_MESSAGE)
        raise SystemExit(1)

    def check(value: str) -> str:
        value = value.strip()
        error = project_name_error(value, cwd=cwd, force=force)
        if error is not None:
            raise click.BadParameter(error)
        return value

    return click.prompt(
        "What is the name of the project? (e.g. example-app)",
        value_proc=check,
        err=True,
    )


def resolve_api_only(api_only: bool | None, *, interactive: bool) -> bool:
    if api_only is not None:
        return api_only
    if not interactive:
        return False
    return click.confirm("Is the project an API-only project?", default=False, err=True)


def git_is_available(ctx: InstallerContext) -> bool:
    """Probe for a usable git binary with `git --version`."""
    return ctx.process.run(["git", "--version"], cwd=ctx.cwd).succeeded


def resolve_initialize_git(
    ctx: InstallerContext, initialize_git: bool | None, *, interactive: bool
) -> bool:
    """Decide whether to create a repository.

    An explicit flag wins without probing. Otherwise the question is only
    asked when git is installed; without git the answer is False.
    """
    if initialize_git is not None:
        return initialize_git
    if not interactive:
        return False
    if not git_is_available(ctx):
        logger.debug("git not available, skipping repository prompt")
        return False
    return click.confirm(
        "Would you like to initialize a Git repository?", default=False, err=True
    )


def resolve_use_pest(use_pest: bool | None, *, interactive: bool) -> bool:
    if use_pest is not None:
        return use_pest
    if not interactive:
        return True
    choice = click.prompt(
        "Which testing framework should be installed?",
        type=click.Choice([PEST, PHPUNIT], case_sensitive=False),
        default=PEST,
        err=True,
    )
    return choice.lower() == PEST.lower()
