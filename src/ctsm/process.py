"""Subprocess helpers shared by the git and package manager steps."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Sequence

from .errors import CommandError

__all__ = ["CommandResult", "Runner", "run_command"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


Runner = Callable[..., Awaitable[CommandResult]]


async def run_command(
    argv: Sequence[str],
    *,
    cwd: str | Path | None = None,
    check: bool = True,
) -> CommandResult:
    """Run ``argv`` and capture its output.

    When ``check`` is true a non-zero exit raises
    :class:`~ctsm.errors.CommandError`. A missing executable surfaces as the
    ``OSError`` raised by the event loop.
    """

    LOGGER.debug("Running %s (cwd=%s)", " ".join(argv), cwd or ".")
    process = await asyncio.create_subprocess_exec(
        *argv,
        cwd=str(cwd) if cwd is not None else None,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    result = CommandResult(
        argv=tuple(argv),
        returncode=process.returncode if process.returncode is not None else 0,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )
    LOGGER.debug("%s exited with %s", argv[0], result.returncode)

    if check and result.returncode != 0:
        raise CommandError(list(argv), result.returncode, result.stderr or result.stdout)
    return result
