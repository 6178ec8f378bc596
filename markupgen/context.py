"""Streaming XML/HTML serializer that keeps track of open tags."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO, Tuple, Union

from . import diagnostics
from .attrs import Attrs, write_attrs
from .diagnostics import Diagnostic, DiagnosticSink, StreamDiagnostics
from .escape import write_escaped, write_raw
from .tag_stack import TagStack

WarnTarget = Union[TextIO, DiagnosticSink]


@dataclass
class XmlContext:
    """State and configuration for writing one document.

    Output goes to ``out`` (stdout by default). If ``warn`` is set, contract
    violations such as closing a tag that is not the innermost open one are
    reported there; it may be a text stream or a :class:`DiagnosticSink`.
    ``closing_slash`` controls whether empty tags end in ``/>`` (XML) or
    ``>`` (HTML5 void elements).

    None of the operations raise on misuse. An offending call is skipped,
    optionally reported, and the context stays consistent. Because of that
    the serializer never writes a closing tag that would break the nesting
    it has tracked. It cannot tell whether the nesting is the one the caller
    intended, and an inner tag left open makes it refuse to close the outer
    ones.

    A context belongs to a single generation task. Call :meth:`teardown`
    (or use the context as a ``with`` block) once the document is written.
    """

    out: TextIO = field(default_factory=lambda: sys.stdout)
    warn: Optional[WarnTarget] = None
    closing_slash: bool = True
    _stack: TagStack = field(default_factory=TagStack, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.warn is not None and not isinstance(self.warn, DiagnosticSink):
            self.warn = StreamDiagnostics(self.warn)

    def __enter__(self) -> "XmlContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.teardown()

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def open_tags(self) -> Tuple[str, ...]:
        """Currently open tags, innermost first."""

        return tuple(self._stack)

    def peek(self) -> Optional[str]:
        return self._stack.peek()

    def _report(self, diagnostic: Diagnostic) -> None:
        if self.warn is not None:
            self.warn.report(diagnostic)  # type: ignore[union-attr]

    def teardown(self) -> None:
        """Discard remaining open tags, reporting them if warnings are on.

        Nothing is written to ``out``. With nothing open it does nothing, so
        calling it twice is harmless.
        """

        if self._stack:
            self._report(diagnostics.unclosed_tags(self._stack))
            self._stack.clear()

    def raw(self, text: str) -> None:
        """Write ``text`` unchanged. Use :meth:`escaped` for untrusted text."""

        write_raw(self.out, text)

    def escaped(self, text: str) -> None:
        """Write ``text`` with ``& < > ' "`` replaced by entities."""

        write_escaped(self.out, text)

    def _start_tag(self, tag: str, attrs: Attrs) -> None:
        self.out.write("<")
        self.out.write(tag)
        if not write_attrs(self.out, attrs):
            self._report(diagnostics.nameless_attr(tag))

    def empty_tag(self, tag: str, attrs: Attrs = ()) -> None:
        """Write a childless tag such as ``<br/>``; the stack is not touched."""

        if not tag:
            self._report(diagnostics.missing_tag())
            return
        self._start_tag(tag, attrs)
        if self.closing_slash:
            self.out.write("/")
        self.out.write(">")

    def open_tag_attrs(self, tag: str, attrs: Attrs) -> None:
        """Write an opening tag with attributes and remember it for closing.

        ``attrs`` is a sequence of ``(name, value)`` pairs. A ``None`` value
        gives an attribute without ``="..."``. Values are escaped, names are
        not.
        """

        if not tag:
            self._report(diagnostics.missing_tag())
            return
        self._start_tag(tag, attrs)
        self.out.write(">")
        self._stack.push(tag)

    def open_tag(self, tag: str) -> None:
        self.open_tag_attrs(tag, ())

    def _close_top(self) -> str:
        tag = self._stack.pop()
        self.out.write("</")
        self.out.write(tag)
        self.out.write(">")
        return tag

    def close_tag(self, tag: str) -> None:
        """Close ``tag`` if it is the innermost open tag.

        Otherwise nothing is written, the stack is left alone and a
        diagnostic says whether nothing was open or another tag still is.
        """

        if not tag:
            self._report(diagnostics.missing_tag())
            return
        if self._stack.peek() != tag:
            self._report(diagnostics.refused_close(tag, stack_empty=not self._stack))
            return
        self._close_top()

    def close_all(self) -> None:
        """Close every open tag, innermost first."""

        while self._stack:
            self._close_top()

    def close_including(self, tag: str) -> None:
        """Close open tags up to and including the innermost ``tag``.

        With nested tags of the same name this stops at the first (innermost)
        one, which may not be the one the caller meant::

            open a, open b, open a, open c, close_including a
            -> <a><b><a><c></c></a>

        If ``tag`` is not open at all, every tag gets closed and a diagnostic
        is reported.
        """

        if not tag:
            self._report(diagnostics.missing_tag())
            return
        if not self._stack:
            self._report(diagnostics.tag_not_found(tag, stack_was_empty=True))
            return
        while self._stack:
            if self._close_top() == tag:
                return
        self._report(diagnostics.tag_not_found(tag, stack_was_empty=False))

    def cdata_open(self) -> None:
        """Start a CDATA section; write its content with :meth:`raw`."""

        self.out.write("<![CDATA[")

    def cdata_close(self) -> None:
        self.out.write("]]>")


__all__ = ["WarnTarget", "XmlContext"]
