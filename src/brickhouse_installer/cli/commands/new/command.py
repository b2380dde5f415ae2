"""CLI command entry point for new."""

import logging

import click
from rich.console import Console

from brickhouse_installer.core.context import InstallerContext

from .output import format_success_banner, format_welcome
from .pipeline import build_project
from .prompts import resolve_api_only, resolve_directory, resolve_initialize_git, resolve_use_pest
from .types import BuildConfig
from .validation import ensure_project_absent

logger = logging.getLogger(__name__)


@click.command("new")
@click.argument("directory", metavar="NAME", required=False)
@click.option(
    "-f",
    "--force/--no-force",
    default=False,
    help="Forces install even if the directory already exists.",
)
@click.option(
    "-q",
    "--quiet/--no-quiet",
    default=False,
    help="Suppresses all command outputs.",
)
@click.option(
    "--git/--no-git",
    "initialize_git",
    default=None,
    help="Whether to initialize a Git repository in the project.",
)
@click.option(
    "--api/--no-api",
    "api_only",
    default=None,
    help="Creates an API-only project.",
)
@click.option(
    "--pest/--no-pest",
    "use_pest",
    default=None,
    help="Uses Pest instead of PHPUnit.",
)
@click.option(
    "--php-binary",
    type=str,
    default=None,
    help="Name or path to the PHP binary.",
)
@click.option(
    "--composer-binary",
    type=str,
    default=None,
    help="Name or path to the Composer binary.",
)
@click.option(
    "-n",
    "--no-interaction",
    is_flag=True,
    help="Never prompt; unanswered questions take their defaults.",
)
@click.pass_obj
def new_cmd(
    ctx: InstallerContext,
    directory: str | None,
    force: bool,
    quiet: bool,
    initialize_git: bool | None,
    api_only: bool | None,
    use_pest: bool | None,
    php_binary: str | None,
    composer_binary: str | None,
    no_interaction: bool,
) -> None:
    """Create a new Brickhouse application.

    Options that are not given on the command line are asked for
    interactively. Exits with the code of the first failing external
    command, or 1 if NAME already exists and --force was not given.
    """
    console = Console(stderr=True)
    console.print(format_welcome())

    interactive = not no_interaction

    # 1. Project name, then the hard existence check
    directory = resolve_directory(directory, cwd=ctx.cwd, force=force, interactive=interactive)
    ensure_project_absent(ctx.cwd / directory, force=force)

    # 2. Remaining choices
    config = BuildConfig(
        directory=directory,
        force=force,
        quiet=quiet,
        api_only=resolve_api_only(api_only, interactive=interactive),
        initialize_git=resolve_initialize_git(ctx, initialize_git, interactive=interactive),
        use_pest=resolve_use_pest(use_pest, interactive=interactive),
        php_binary=php_binary or ctx.global_config.php_binary,
        composer_binary=composer_binary or ctx.global_config.composer_binary,
    )

    # 3. Build
    try:
        exit_code = build_project(ctx, config)
    except OSError as e:
        logger.debug("Exception details:", exc_info=True)
        ctx.feedback.error(f"Error: {e}")
        raise SystemExit(1) from None

    if exit_code != 0:
        raise SystemExit(exit_code)

    console.print(format_success_banner(config.directory))
