"""Running external commands on behalf of the build pipeline.

Every external invocation of a stage goes through run_command() so echoing,
streaming and failure reporting behave the same in every stage.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from brickhouse_installer.core.context import InstallerContext
from brickhouse_installer.core.process import format_command

from .types import BuildConfig

logger = logging.getLogger(__name__)


def run_command(
    ctx: InstallerContext,
    config: BuildConfig,
    args: Sequence[str],
    *,
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run one command, streaming its output unless quiet.

    On failure the command line is reported, along with the captured stderr
    when it was not streamed.

    Returns:
        The command's exit code
    """
    command_line = format_command(args)
    if not config.quiet:
        ctx.feedback.command(command_line)

    result = ctx.process.run(
        args,
        cwd=cwd,
        env=env,
        on_output=None if config.quiet else ctx.feedback.stream,
    )

    if not result.succeeded:
        logger.debug("Command failed with %d: %s", result.exit_code, command_line)
        ctx.feedback.error(f"Command returned with exit code {result.exit_code}: {command_line}")
        # Already streamed unless quiet
        if config.quiet and result.stderr:
            ctx.feedback.stream(result.stderr)

    return result.exit_code


def run_sequence(
    ctx: InstallerContext,
    config: BuildConfig,
    commands: Sequence[Sequence[str]],
    *,
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run commands in order, stopping at the first failure.

    Returns:
        0 if every command succeeded, otherwise the failing command's exit code
    """
    for args in commands:
        exit_code = run_command(ctx, config, args, cwd=cwd, env=env)
        if exit_code != 0:
            return exit_code
    return 0
