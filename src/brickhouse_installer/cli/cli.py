import logging
import os

import click

from brickhouse_installer.cli.commands.new import new_cmd
from brickhouse_installer.cli.output import user_output
from brickhouse_installer.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if BRICKHOUSE_DEBUG environment variable is set
if os.getenv("BRICKHOUSE_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="brickhouse-installer")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Create new Brickhouse applications."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None


cli.add_command(new_cmd)


def main() -> None:
    """CLI entry point used by the `brickhouse` console script."""
    cli()
