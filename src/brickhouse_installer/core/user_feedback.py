"""User-facing progress output for the build pipeline."""

from abc import ABC, abstractmethod

import click

from brickhouse_installer.cli.output import user_output


class UserFeedback(ABC):
    """Writes pipeline progress to the user.

    Pipeline stages never print directly. They call ctx.feedback methods so
    tests can swap in a recording fake and assert on what the user saw.

    Usage:
        ctx.feedback.info("Creating project 'example-app'...")
        ctx.feedback.command("composer create-project ...")  # shown as "> composer ..."
        ctx.feedback.stream(chunk)  # raw process output, no newline added
        ctx.feedback.error("Command returned with exit code 2: ...")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show a status line."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a success line."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error line."""

    @abstractmethod
    def command(self, command_line: str) -> None:
        """Echo an external command line before it runs."""

    @abstractmethod
    def stream(self, chunk: str) -> None:
        """Pass through raw output from an external process."""


class InteractiveFeedback(UserFeedback):
    """Styled terminal output."""

    def info(self, message: str) -> None:
        user_output(click.style(message, fg="cyan"))

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))

    def command(self, command_line: str) -> None:
        user_output(click.style(f"> {command_line}", dim=True))

    def stream(self, chunk: str) -> None:
        user_output(chunk, nl=False)
