"""Minimal ``-key`` / ``--key=value`` command line tokenizer."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import TypeVar

from .errors import FlagError

__all__ = ["Flags", "FlagValue", "parse"]

FlagValue = str | bool
T = TypeVar("T", bound=str)


class Flags(Mapping[str, FlagValue]):
    """Read-only view over parsed flags with typed accessors.

    Presence-only flags map to ``True``; flags written as ``--key=value`` map
    to the string ``value``. The ``*_or_raise`` accessors treat the flag as
    required, the ``*_or_default`` accessors fall back to a default when the
    flag is absent. Both raise :class:`~ctsm.errors.FlagError` when a present
    value has the wrong type.
    """

    def __init__(self, values: Mapping[str, FlagValue] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, key: str) -> FlagValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Flags({dict(self._values)!r})"

    def to_dict(self) -> dict[str, FlagValue]:
        return dict(self._values)

    def get_boolean_or_raise(self, key: str) -> bool:
        value = self._values.get(key)
        if value is None:
            raise FlagError(f"Missing required flag: {key}")
        if not isinstance(value, bool):
            raise FlagError(f"Flag {key} is not a boolean")
        return value

    def get_string_or_raise(self, key: str) -> str:
        value = self._values.get(key)
        if value is None:
            raise FlagError(f"Missing required flag: {key}")
        if not isinstance(value, str):
            raise FlagError(f"Flag {key} is not a string")
        return value

    def get_boolean_or_default(self, key: str, default: bool) -> bool:
        value = self._values.get(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            raise FlagError(f"Flag {key} is not a boolean")
        return value

    def get_string_or_default(self, key: str, default: str) -> str:
        value = self._values.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            raise FlagError(f"Flag {key} is not a string")
        return value

    def get_string_as_option_or_raise(self, key: str, options: Sequence[T]) -> T:
        """Return the required string flag ``key``, which must be one of ``options``."""

        value = self.get_string_or_raise(key)
        for option in options:
            if option == value:
                return option
        allowed = ", ".join(options)
        raise FlagError(f"Flag {key} is not a valid option (expected one of: {allowed})")

    def get_string_as_option_or_default(self, key: str, options: Sequence[T], default: T) -> T:
        """Return the string flag ``key`` if it is one of ``options``.

        Absent flags and values outside ``options`` both yield ``default``. A
        presence-only flag still raises, since it is not a string at all.
        """

        value = self.get_string_or_default(key, default)
        for option in options:
            if option == value:
                return option
        return default


def _split_flag(body: str) -> tuple[str, FlagValue]:
    key, sep, value = body.partition("=")
    return key, (value if sep else True)


def parse(argv: Sequence[str] | None = None) -> tuple[Flags, list[str]]:
    """Split ``argv`` into flags and positional arguments.

    Tokens starting with ``--`` or ``-`` are flags; everything after the first
    ``=`` is the value. Tokens whose key is empty (``--``, ``-``, ``--=x``) are
    dropped. Later occurrences of a flag replace earlier ones.
    """

    tokens = sys.argv[1:] if argv is None else argv
    values: dict[str, FlagValue] = {}
    positionals: list[str] = []

    for token in tokens:
        if token.startswith("--"):
            key, value = _split_flag(token[2:])
        elif token.startswith("-"):
            key, value = _split_flag(token[1:])
        else:
            positionals.append(token)
            continue
        if not key:
            continue
        values[key] = value

    return Flags(values), positionals
