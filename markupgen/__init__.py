"""Streaming XML/HTML writer with nesting-checked tags."""

from .attrs import Attr, Attrs
from .context import XmlContext
from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog, DiagnosticSink
from .escape import escape_char, escape_text

__all__ = [
    "Attr",
    "Attrs",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "DiagnosticSink",
    "XmlContext",
    "escape_char",
    "escape_text",
]
