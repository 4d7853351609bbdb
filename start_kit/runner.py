"""
runner.py

Responsibility: Run external commands (git, package managers) synchronously.

Every invocation blocks until the process exits. A non-zero exit status, a
missing executable or an expired timeout all come back as a failed
`CommandResult`; deciding whether that is fatal is the caller's job.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Shell convention for "command not found".
MISSING_EXECUTABLE_STATUS = 127


@dataclass(frozen=True)
class CommandResult:
    argv: tuple[str, ...]
    cwd: Path
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)

    def describe_failure(self) -> str:
        message = f"Command failed ({self.returncode}): {self.command_line}"
        output = self.output.strip()
        return f"{message}\n\n{output}" if output else message


class CommandRunner(Protocol):
    def run(self, argv: list[str], *, cwd: Path) -> CommandResult: ...


class SubprocessRunner:
    """`CommandRunner` backed by `subprocess.run`, with combined stdout/stderr."""

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def run(self, argv: list[str], *, cwd: Path) -> CommandResult:
        logger.debug("Running %s in %s", " ".join(argv), cwd)
        try:
            completed = subprocess.run(
                argv,
                cwd=str(cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError:
            return CommandResult(tuple(argv), cwd, MISSING_EXECUTABLE_STATUS, f"{argv[0]}: command not found")
        except subprocess.TimeoutExpired as e:
            output = e.output if isinstance(e.output, str) else ""
            return CommandResult(tuple(argv), cwd, -1, f"Timed out after {self._timeout}s\n{output}")

        result = CommandResult(tuple(argv), cwd, completed.returncode, completed.stdout or "")
        if not result.ok:
            logger.debug("%s exited with status %d", result.command_line, result.returncode)
        return result
