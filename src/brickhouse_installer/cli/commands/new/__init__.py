"""The `brickhouse new` command: scaffold a project from the template package."""

from brickhouse_installer.cli.commands.new.command import new_cmd

__all__ = ["new_cmd"]
