"""External process execution interface.

This module provides a clean abstraction over spawning the package manager,
runtime and version-control binaries, making the build pipeline testable
without subprocess mocks.

Architecture:
- ProcessRunner: Abstract base class defining the interface
- RealProcessRunner: Production implementation using subprocess (see real.py)
- FakeProcessRunner: In-memory test double (see tests/fakes/process.py)
"""

import shlex
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

OutputCallback = Callable[[str], None]

# Exit code reported when the binary could not be located on PATH
COMMAND_NOT_FOUND_EXIT_CODE = 127

# Exit code reported when the binary exists but cannot be executed
COMMAND_NOT_EXECUTABLE_EXIT_CODE = 126

# Added to the signal number of a child killed by a signal
SIGNAL_EXIT_CODE_BASE = 128


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single external invocation.

    Attributes:
        exit_code: Process exit status. Zero is the only success signal.
        stdout: Everything the process wrote to stdout
        stderr: Everything the process wrote to stderr
    """

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def format_command(args: Sequence[str]) -> str:
    """Render an argument list as a copy-pasteable shell line."""
    return shlex.join(str(arg) for arg in args)


class ProcessRunner(ABC):
    """Abstract interface for running external commands.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        on_output: OutputCallback | None = None,
    ) -> CommandResult:
        """Run a command to completion.

        Args:
            args: Command and arguments; args[0] is looked up on PATH
            cwd: Working directory for the command
            env: Extra environment variables layered over the current environment
            on_output: Called with each chunk of stdout/stderr as it arrives.
                       None runs the command silently (output is still captured).

        Returns:
            CommandResult with exit code and captured output. A missing binary
            yields exit code 127 and a non-executable one 126 rather than
            raising. A child killed by signal N yields 128 + N.
        """
        ...
