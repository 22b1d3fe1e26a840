"""Yes/no confirmation on the controlling terminal."""

from __future__ import annotations

import asyncio
from typing import Callable

from .errors import Aborted

__all__ = ["confirm", "confirm_or_abort", "is_affirmative"]


def is_affirmative(answer: str, *, accept_default: bool = False) -> bool:
    """Interpret ``answer``; an empty answer counts as yes only with ``accept_default``."""

    if accept_default and answer == "":
        return True
    return answer.strip().lower().startswith("y")


async def confirm(
    message: str,
    *,
    accept_default: bool = False,
    reader: Callable[[str], str] | None = None,
) -> bool:
    """Show ``message`` and read a single line of input.

    ``reader`` defaults to :func:`input` and runs in a worker thread. Closed
    input (``EOFError``) is treated as a refusal.
    """

    read = reader or input
    try:
        answer = await asyncio.to_thread(read, message)
    except EOFError:
        return False
    return is_affirmative(answer, accept_default=accept_default)


async def confirm_or_abort(
    message: str,
    *,
    accept_default: bool = False,
    reader: Callable[[str], str] | None = None,
) -> None:
    """Like :func:`confirm` but raise :class:`~ctsm.errors.Aborted` on refusal."""

    if not await confirm(message, accept_default=accept_default, reader=reader):
        raise Aborted()
