"""Configuration derived from a single ``ctsm`` invocation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

from .args import Flags
from .errors import UsageError

__all__ = ["PROGRAM_NAME", "PackageManager", "ProjectConfig"]


PROGRAM_NAME = "ctsm"


class PackageManager(str, Enum):
    """Supported JavaScript package managers, primary one first."""

    BUN = "bun"
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]

    @property
    def build_script(self) -> str:
        if self is PackageManager.NPM:
            return "npx tsup"
        return f"{self.value} tsup"

    @property
    def release_script(self) -> str:
        return f"{self.value} run build && {self.value} publish"

    def install_command(self, packages: Sequence[str], *, dev: bool = True) -> list[str]:
        """Return the argv that adds ``packages`` to the project in the current directory."""

        if self is PackageManager.NPM:
            command = ["npm", "install", "--save-dev" if dev else "--save"]
        elif self is PackageManager.YARN:
            command = ["yarn", "add"] + (["--dev"] if dev else [])
        elif self is PackageManager.PNPM:
            command = ["pnpm", "add"] + (["--save-dev"] if dev else [])
        else:
            command = ["bun", "add"] + (["--dev"] if dev else [])
        return command + list(packages)


@dataclass(slots=True)
class ProjectConfig:
    """Everything the scaffolder needs to know about the project to create.

    Attributes
    ----------
    directory:
        Absolute path of the project directory. It is created when missing.
    module_name:
        The package name written to the manifest, the base name of
        :attr:`directory`.
    package_manager:
        The manager used to install dependencies and referenced by the
        generated ``build`` and ``release`` scripts.
    skip_confirmation:
        ``True`` when ``-y`` was passed.
    verbose:
        ``True`` when debug logging was requested.
    """

    directory: Path
    module_name: str
    package_manager: PackageManager = PackageManager.BUN
    skip_confirmation: bool = False
    verbose: bool = False

    @classmethod
    def from_args(
        cls,
        flags: Flags,
        args: Sequence[str],
        *,
        cwd: str | Path,
        cwd_is_empty: bool,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from parsed command line input.

        Parameters
        ----------
        flags:
            Parsed flags. ``y`` skips confirmation, ``p`` selects the package
            manager (unknown values fall back to ``bun``), ``v``/``verbose``
            enables debug logging.
        args:
            Positional arguments; the first one names the project directory.
        cwd:
            The directory the tool was started from.
        cwd_is_empty:
            Whether ``cwd`` has no entries. Only then may the name be omitted,
            in which case ``cwd`` itself becomes the project.
        """

        cwd = Path(cwd)
        name = args[0] if args else (os.fspath(cwd) if cwd_is_empty else "")

        if not name:
            raise UsageError(_missing_name_message(cwd_is_empty))

        directory = (cwd / name).resolve()
        module_name = directory.name
        if not module_name:
            raise UsageError("Error: Expected this folder to have a name")

        manager = flags.get_string_as_option_or_default(
            "p", PackageManager.choices(), PackageManager.BUN.value
        )

        return cls(
            directory=directory,
            module_name=module_name,
            package_manager=PackageManager(manager),
            skip_confirmation=flags.get_boolean_or_default("y", False),
            verbose=flags.get_boolean_or_default("verbose", False)
            or flags.get_boolean_or_default("v", False),
        )

    def confirmation_message(self) -> str:
        return (
            f"Create '{self.module_name}' with {self.package_manager.value} "
            f"at {self.directory}? (Y/n) "
        )


def _missing_name_message(cwd_is_empty: bool) -> str:
    if cwd_is_empty:
        return "Error: Expected this folder to have a name"
    return "\n".join(
        [
            "",
            f"You ran {PROGRAM_NAME} in a folder that was not already empty!",
            "You must specify a name of the package to create it",
            "",
            f"Example: `{PROGRAM_NAME} my-awesome-library`",
            "",
        ]
    )
