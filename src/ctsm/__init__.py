"""Scaffold new TypeScript libraries.

The package exposes the small flag parser and text helpers used by the ``ctsm``
command, the :class:`ProjectScaffolder` that writes a project skeleton, and the
command line entry point itself.
"""

from __future__ import annotations

from .args import Flags, parse
from .config import PackageManager, ProjectConfig
from .errors import Aborted, CommandError, CtsmError, FlagError, UsageError
from .license import mit
from .scaffold import ProjectScaffolder
from .template import dedent, to_json

__all__ = [
    "Aborted",
    "CommandError",
    "CtsmError",
    "FlagError",
    "Flags",
    "PackageManager",
    "ProjectConfig",
    "ProjectScaffolder",
    "UsageError",
    "dedent",
    "mit",
    "parse",
    "to_json",
]

__version__ = "0.1.0"
