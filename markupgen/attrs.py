"""Attribute emission for opening and empty tags."""

from __future__ import annotations

import io
from typing import Optional, Sequence, TextIO, Tuple

from .escape import escape_text

Attr = Tuple[str, Optional[str]]
Attrs = Sequence[Attr]


def write_attrs(out: TextIO, attrs: Attrs) -> bool:
    """Write ``attrs`` as `` name="value"`` pairs in the given order.

    A ``None`` value produces a bare (valueless) attribute. Names are written
    as-is, only values are escaped. If a pair has no name, that pair and all
    following pairs are dropped and ``False`` is returned.
    """

    for name, value in attrs:
        if not name:
            return False
        out.write(" ")
        out.write(name)
        if value is not None:
            out.write('="')
            out.write(escape_text(value))
            out.write('"')
    return True


def render_attrs(attrs: Attrs) -> str:
    buffer = io.StringIO()
    write_attrs(buffer, attrs)
    return buffer.getvalue()


__all__ = ["Attr", "Attrs", "render_attrs", "write_attrs"]
