"""License text for generated projects."""

from __future__ import annotations

import datetime as _dt

from .template import dedent

__all__ = ["PLACEHOLDER_HOLDER", "mit"]


PLACEHOLDER_HOLDER = "<copyright holder>"

MIT_TEMPLATE = """
    MIT License

    Copyright (c) {year} {holder}

    Permission is hereby granted, free of charge, to any person obtaining a copy
    of this software and associated documentation files (the "Software"), to deal
    in the Software without restriction, including without limitation the rights
    to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
    copies of the Software, and to permit persons to whom the Software is
    furnished to do so, subject to the following conditions:

    The above copyright notice and this permission notice shall be included in all
    copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
    IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
    FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
    AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
    LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
    OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
    SOFTWARE.
"""


def mit(holder: str | None = None, *, year: int | None = None) -> str:
    """Return the MIT license text for ``holder`` and ``year`` (default: this year)."""

    if year is None:
        year = _dt.date.today().year
    name = holder.strip() if holder else ""
    return dedent(MIT_TEMPLATE.format(year=year, holder=name or PLACEHOLDER_HOLDER))
