"""Async execution of external ffmpeg/ffprobe processes."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence


@dataclass
class ProcessResult:
    """Exit status and captured output of a finished process."""
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


ProcessRunner = Callable[[Sequence[str]], Awaitable[ProcessResult]]


async def run_process(command: Sequence[str]) -> ProcessResult:
    """
    Run a command and wait for it to finish.

    The calling task is suspended until the process exits. There is no
    timeout: a hung process blocks the caller.

    Args:
        command: Executable followed by its arguments

    Returns:
        ProcessResult with decoded stdout and stderr

    Raises:
        OSError: If the executable cannot be started
    """
    logging.debug(f"Running: {' '.join(command)}")
    process = await asyncio.create_subprocess_exec(
        *command,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    return ProcessResult(
        returncode=process.returncode,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )
