"""Output utilities for CLI commands.

user_output() is for humans: status lines, prompts, errors. It goes to stderr
so stdout stays free for anything a caller may want to pipe.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write human-facing output to stderr."""
    click.echo(message, nl=nl, err=True)
