"""Command line entry point: ``ctsm [name] [-y] [-p=bun|npm|yarn|pnpm]``."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Callable, Sequence

from rich.console import Console
from rich.markup import escape

from . import git
from .args import parse
from .config import PROGRAM_NAME, PackageManager, ProjectConfig
from .errors import Aborted, CtsmError
from .prompt import confirm_or_abort
from .scaffold import ProjectScaffolder

LOGGER = logging.getLogger(__name__)

USAGE = f"""Usage: {PROGRAM_NAME} [name] [flags]

Create a TypeScript library in ./name, or in the current directory when it is
empty and no name is given.

Flags:
  -y                  Skip the confirmation prompt
  -p=<manager>        Package manager: {", ".join(PackageManager.choices())} (default: bun)
  -v, --verbose       Log every command and file written
  -h, --help          Show this message
"""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def is_directory_empty(path: str | Path) -> bool:
    return not any(Path(path).iterdir())


async def run(
    argv: Sequence[str] | None = None,
    *,
    cwd: str | Path | None = None,
    scaffolder: ProjectScaffolder | None = None,
    reader: Callable[[str], str] | None = None,
) -> int:
    """Scaffold a project from ``argv`` and return the exit status."""

    working_dir = Path(cwd) if cwd is not None else Path(os.getcwd())
    cwd_is_empty = is_directory_empty(working_dir)

    flags, args = parse(argv)
    if flags.get_boolean_or_default("h", False) or flags.get_boolean_or_default("help", False):
        print(USAGE, end="")
        return 0

    config = ProjectConfig.from_args(flags, args, cwd=working_dir, cwd_is_empty=cwd_is_empty)
    _configure_logging(config.verbose)
    LOGGER.debug("Resolved configuration: %s", config)

    if not config.skip_confirmation:
        await confirm_or_abort(config.confirmation_message(), accept_default=True, reader=reader)

    print(f"Writing package {config.module_name} at {config.directory}")

    scaffolder = scaffolder or ProjectScaffolder()
    user = await git.get_git_user(runner=scaffolder.runner)
    await scaffolder.create(config, user)
    return 0


def main(argv: Sequence[str] | None = None, *, cwd: str | Path | None = None) -> int:
    console = Console(stderr=True)
    try:
        return asyncio.run(run(argv, cwd=cwd))
    except Aborted as exc:
        return exc.exit_code
    except CtsmError as exc:
        console.print(f"[red]{escape(exc.message)}[/red]", soft_wrap=True)
        return exc.exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
