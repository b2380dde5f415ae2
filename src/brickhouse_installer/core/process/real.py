"""Production ProcessRunner implementation using subprocess."""

import logging
import os
import subprocess
import threading
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import IO

from brickhouse_installer.core.process.abc import (
    COMMAND_NOT_EXECUTABLE_EXIT_CODE,
    COMMAND_NOT_FOUND_EXIT_CODE,
    SIGNAL_EXIT_CODE_BASE,
    CommandResult,
    OutputCallback,
    ProcessRunner,
    format_command,
)

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Runs commands with subprocess.Popen, streaming output line by line."""

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        on_output: OutputCallback | None = None,
    ) -> CommandResult:
        cmd_args = [str(arg) for arg in args]
        logger.debug("Running %s (cwd=%s, env=%s)", format_command(cmd_args), cwd, env)

        process_env = None
        if env:
            process_env = {**os.environ, **env}

        try:
            process = subprocess.Popen(
                cmd_args,
                cwd=cwd,
                env=process_env,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,  # Line buffered
            )
        except FileNotFoundError:
            logger.debug("Binary not found: %s", cmd_args[0])
            return CommandResult(
                exit_code=COMMAND_NOT_FOUND_EXIT_CODE,
                stdout="",
                stderr=f"Command not found: {cmd_args[0]}\n",
            )
        except PermissionError:
            logger.debug("Binary not executable: %s", cmd_args[0])
            return CommandResult(
                exit_code=COMMAND_NOT_EXECUTABLE_EXIT_CODE,
                stdout="",
                stderr=f"Permission denied: {cmd_args[0]}\n",
            )

        stdout_chunks: list[str] = []
        stderr_chunks: list[str] = []

        # Drain stderr in the background so neither pipe can fill up and block
        stderr_thread = threading.Thread(
            target=_pump,
            args=(process.stderr, stderr_chunks, on_output),
            daemon=True,
        )
        stderr_thread.start()
        _pump(process.stdout, stdout_chunks, on_output)
        stderr_thread.join()

        exit_code = process.wait()
        if exit_code < 0:
            # Killed by signal -exit_code
            exit_code = SIGNAL_EXIT_CODE_BASE - exit_code
        logger.debug("Exit code %d from %s", exit_code, format_command(cmd_args))

        return CommandResult(
            exit_code=exit_code,
            stdout="".join(stdout_chunks),
            stderr="".join(stderr_chunks),
        )


def _pump(stream: IO[str] | None, sink: list[str], on_output: OutputCallback | None) -> None:
    if stream is None:
        return
    for line in stream:
        sink.append(line)
        if on_output is not None:
            on_output(line)
    stream.close()
