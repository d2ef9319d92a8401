# githelper/command_runner.py
"""
CommandRunner - runs git as a local subprocess using asyncio.

Executes git with:
- An argument list passed straight to the program (no shell)
- Output capture (stdout then stderr, trimmed)
- A record of every attempted call in the user-facing log sink
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Sequence

from .exceptions import PreconditionError
from .execution_result import NO_OUTPUT_PLACEHOLDER, ExecutionResult
from .log_sink import LogSink

logger = logging.getLogger(__name__)

DEFAULT_GIT = "git"


def require_workspace(working_directory: str | os.PathLike[str] | None) -> str:
    """
    Return working_directory as a string.

    Raises:
        PreconditionError: If no project folder is open (working_directory is None)
    """
    if working_directory is None:
        raise PreconditionError()
    return os.fspath(working_directory)


def format_command_line(program: str, args: Sequence[str]) -> str:
    """
    Render a command for display. Arguments containing whitespace are quoted.

    For humans only; never used to build what actually runs.
    """
    parts = [program]
    for a in args:
        parts.append(f'"{a}"' if any(c.isspace() for c in a) else a)
    return " ".join(parts)


class CommandRunner:
    """
    Executes git commands as local subprocesses.

    Features:
    - Non-blocking execution
    - argv-style arguments, so user text reaches git as one opaque argument
    - Logging of every attempted call to the log sink

    There is no timeout and no cancellation: once spawned, a process runs to
    completion. The runner holds no locks; callers serialize if they need to.
    """

    def __init__(self, log_sink: LogSink, program: str = DEFAULT_GIT):
        """
        Initialize the runner.

        Args:
            log_sink: Where each call and its output is recorded for the user
            program: Executable name, resolved on PATH by the OS
        """
        self._sink = log_sink
        self._program = program

        logger.debug(f"Initialized CommandRunner (program={program!r}, sink={log_sink!r})")

    @property
    def program(self) -> str:
        return self._program

    async def run(
        self,
        args: Sequence[str],
        working_directory: str | os.PathLike[str] | None,
    ) -> ExecutionResult:
        """
        Run the program with args in working_directory and wait for it.

        A working_directory of None means no project folder is open; nothing
        is spawned and a failure result with NO_WORKSPACE_MESSAGE is returned.
        """
        try:
            cwd = require_workspace(working_directory)
        except PreconditionError as e:
            logger.debug(f"Refusing to run {self._program} {list(args)}: {e}")
            self._sink.append_line(f"ERROR: {e}")
            self._sink.show()
            return ExecutionResult(succeeded=False, output_text=str(e))

        argv = [str(a) for a in args]

        self._sink.append_line(f"> {format_command_line(self._program, argv)}")
        self._sink.append_line(f"  (in: {cwd})")
        self._sink.append_line("---")

        result = await self._execute(argv, cwd)

        if result.succeeded:
            self._sink.append_line(result.output_text)
        else:
            self._sink.append_line(f"ERROR:\n{result.output_text}")
        self._sink.show()
        self._sink.append_line("")

        return result

    async def _execute(self, argv: list[str], cwd: str) -> ExecutionResult:
        """Spawn, wait, and normalize. Never raises except for cancellation."""
        try:
            logger.debug(f"Launching {self._program} {argv} in {cwd}")
            process = await asyncio.create_subprocess_exec(
                self._program,
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
            stdout, stderr = await process.communicate()
        except (OSError, ValueError) as e:
            # OSError: missing executable or missing/unreadable cwd.
            # ValueError: an argument the OS refuses, e.g. an embedded null byte.
            logger.debug(f"Could not start {self._program}: {e}")
            return ExecutionResult(succeeded=False, output_text=str(e) or type(e).__name__)
        except Exception as e:
            logger.exception(f"Unexpected error running {self._program} {argv}: {e}")
            return ExecutionResult(succeeded=False, output_text=str(e) or type(e).__name__)

        output = (_decode(stdout) + _decode(stderr)).strip()

        if process.returncode == 0:
            logger.debug(f"{self._program} {argv} succeeded (output={len(output)} chars)")
            return ExecutionResult(succeeded=True, output_text=output or NO_OUTPUT_PLACEHOLDER)

        error_msg = f"{self._program} exited with code {process.returncode}"
        logger.debug(f"{self._program} {argv} failed: {error_msg} (output={len(output)} chars)")
        return ExecutionResult(succeeded=False, output_text=output or error_msg)

    def __repr__(self) -> str:
        return f"CommandRunner(program={self._program!r})"


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""
