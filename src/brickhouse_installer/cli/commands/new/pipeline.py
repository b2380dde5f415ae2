"""Sequencing of the build stages.

materialize -> shape -> git. A materialization failure ends the run before
anything touches the (missing or partial) skeleton. Shaping and git failures
are reported as they happen and the first one becomes the run's exit code.
"""

import logging

from brickhouse_installer.core.context import InstallerContext

from .materialize import materialize_project
from .shaping import shape_project
from .types import BuildConfig
from .vcs import initialize_repository

logger = logging.getLogger(__name__)


def build_project(ctx: InstallerContext, config: BuildConfig) -> int:
    """Run the whole build pipeline for a resolved config.

    Returns:
        0 if every stage succeeded, otherwise the first non-zero exit code

    Raises:
        OSError: If pruning or stub copying fails on the filesystem
    """
    logger.debug("Building project with %s", config)

    exit_code = materialize_project(ctx, config)
    if exit_code != 0:
        logger.debug("Materialization failed with %d, stopping", exit_code)
        return exit_code

    outcomes = shape_project(ctx, config)
    failures = [outcome for outcome in outcomes if outcome.exit_code != 0]
    if failures:
        logger.debug("Shaping steps failed: %s", [outcome.name for outcome in failures])
        exit_code = failures[0].exit_code

    if config.initialize_git:
        git_exit_code = initialize_repository(ctx, config)
        if exit_code == 0:
            exit_code = git_exit_code

    return exit_code
