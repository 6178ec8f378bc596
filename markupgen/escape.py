"""Escaping helpers for XML/HTML text and attribute values."""

from __future__ import annotations

from typing import Dict, TextIO

# Only the characters with syntactic meaning in XML are replaced; everything
# else is passed through and assumed to be correctly encoded already.
XML_ENTITIES: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "'": "&apos;",
    '"': "&quot;",
}

_ESCAPE_TABLE = str.maketrans(XML_ENTITIES)


def escape_char(char: str) -> str:
    """Return the escaped form of a single character."""

    return XML_ENTITIES.get(char, char)


def escape_text(text: str) -> str:
    """Escape every metacharacter in ``text``.

    Escaping is not idempotent: ``escape_text("&amp;")`` yields ``"&amp;amp;"``,
    so raw content must be escaped exactly once.
    """

    return text.translate(_ESCAPE_TABLE)


def write_escaped(out: TextIO, text: str) -> None:
    out.write(escape_text(text))


def write_raw(out: TextIO, text: str) -> None:
    """Write ``text`` verbatim; the caller vouches that it is safe markup."""

    out.write(text)


__all__ = ["XML_ENTITIES", "escape_char", "escape_text", "write_escaped", "write_raw"]
