"""Text helpers for the files written into a new project."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any

__all__ = ["dedent", "to_json"]


_LEADING_WHITESPACE = re.compile(r"^\s*")


def dedent(text: str | Iterable[str]) -> str:
    """Normalise an indented multi-line block.

    Parameters
    ----------
    text:
        The block to normalise. An iterable of strings is concatenated first,
        which allows callers to pass pieces with interpolated values.

    Leading blank lines and trailing whitespace are removed. The indentation of
    the first non-blank line is measured once and that many characters are cut
    from every line, so deeper-indented lines keep their extra indentation.
    """

    if not isinstance(text, str):
        text = "".join(text)

    lines = text.rstrip().split("\n")
    first = next((index for index, line in enumerate(lines) if line.strip()), None)
    if first is None:
        return ""

    lines = lines[first:]
    width = len(_LEADING_WHITESPACE.match(lines[0]).group(0))
    return "\n".join(line[width:] for line in lines).rstrip()


def to_json(value: Any) -> str:
    """Serialise ``value`` as JSON indented with one tab per level."""

    return json.dumps(value, indent="\t", ensure_ascii=False)
