"""Creating the project skeleton from the template package."""

import json
import logging
import shutil

from brickhouse_installer.core.context import InstallerContext
from brickhouse_installer.core.files import project_exists

from .execution import run_sequence
from .types import BuildConfig

logger = logging.getLogger(__name__)


def create_project_commands(ctx: InstallerContext, config: BuildConfig) -> list[list[str]]:
    """Build the Composer invocations that materialize the skeleton."""
    settings = ctx.global_config

    create = [
        config.composer_binary,
        "create-project",
        settings.template_package,
        config.directory,
        settings.template_version,
        "--remove-vcs",
        "--prefer-dist",
        "--no-scripts",
    ]
    if settings.template_repository is not None:
        repository = {"type": "path", "url": str(settings.template_repository)}
        create.extend(["--repository", json.dumps(repository)])
    create.append("--ansi")

    post_install = [
        config.composer_binary,
        "run",
        "post-root-package-install",
        "-d",
        config.directory,
    ]

    return [create, post_install]


def materialize_project(ctx: InstallerContext, config: BuildConfig) -> int:
    """Create the project directory, replacing it first when forced.

    Returns:
        0 on success, otherwise the exit code of the first failing command
    """
    project_path = config.project_path(ctx.cwd)

    ctx.feedback.info(f"Creating project '{config.directory}'...")

    if config.force and project_exists(project_path):
        logger.debug("Removing existing directory %s", project_path)
        shutil.rmtree(project_path)

    return run_sequence(ctx, config, create_project_commands(ctx, config), cwd=ctx.cwd)
