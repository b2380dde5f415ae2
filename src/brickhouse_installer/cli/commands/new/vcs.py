"""Initializing a git repository in the new project."""

import logging

from brickhouse_installer.core.context import InstallerContext

from .execution import run_sequence
from .types import BuildConfig

logger = logging.getLogger(__name__)

FALLBACK_BRANCH = "main"
INITIAL_COMMIT_MESSAGE = "feat: create new Brickhouse application"


def resolve_default_branch(ctx: InstallerContext) -> str:
    """Read init.defaultBranch from the global git config.

    Returns:
        The configured branch name, or "main" if git reports none
    """
    result = ctx.process.run(["git", "config", "--global", "init.defaultBranch"], cwd=ctx.cwd)
    branch = result.stdout.strip()

    if not result.succeeded or not branch:
        logger.debug("No init.defaultBranch configured, using %s", FALLBACK_BRANCH)
        return FALLBACK_BRANCH

    return branch


def initialize_repository(ctx: InstallerContext, config: BuildConfig) -> int:
    """Create the repository, commit everything, and name the branch.

    Returns:
        0 on success, otherwise the exit code of the first failing git command
    """
    ctx.feedback.info("Initializing Git repository...")

    branch = resolve_default_branch(ctx)
    commands = [
        ["git", "init", "-q"],
        ["git", "add", "."],
        ["git", "commit", "-m", INITIAL_COMMIT_MESSAGE],
        ["git", "branch", "-M", branch],
    ]
    exit_code = run_sequence(ctx, config, commands, cwd=config.project_path(ctx.cwd))
    if exit_code == 0:
        ctx.feedback.success(f"Initialized Git repository on branch '{branch}'.")
    return exit_code
