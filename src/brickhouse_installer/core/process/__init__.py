from brickhouse_installer.core.process.abc import (
    COMMAND_NOT_EXECUTABLE_EXIT_CODE,
    COMMAND_NOT_FOUND_EXIT_CODE,
    SIGNAL_EXIT_CODE_BASE,
    CommandResult,
    ProcessRunner,
    format_command,
)
from brickhouse_installer.core.process.real import RealProcessRunner

__all__ = [
    "COMMAND_NOT_EXECUTABLE_EXIT_CODE",
    "COMMAND_NOT_FOUND_EXIT_CODE",
    "SIGNAL_EXIT_CODE_BASE",
    "CommandResult",
    "ProcessRunner",
    "RealProcessRunner",
    "format_command",
]
