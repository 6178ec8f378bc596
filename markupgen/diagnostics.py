"""Non-fatal diagnostics reported by the serializer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO


class DiagnosticKind(str, enum.Enum):
    """Category of a contract violation."""

    NESTING = "nesting"
    """A close would break nesting, or close_including found no match."""

    EMPTY_STACK = "empty-stack"
    """A close-family call was made with nothing open."""

    ARGUMENT = "argument"
    """Missing tag name or an attribute pair without a name."""

    UNCLOSED = "unclosed"
    """Tags were still open when the context was torn down."""


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return self.message


def missing_tag() -> Diagnostic:
    return Diagnostic(DiagnosticKind.ARGUMENT, "Got no tag")


def nameless_attr(tag: str) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.ARGUMENT,
        f"Got attribute without name for tag {tag}, dropping remaining attributes",
    )


def refused_close(tag: str, *, stack_empty: bool) -> Diagnostic:
    if stack_empty:
        return Diagnostic(
            DiagnosticKind.EMPTY_STACK,
            f"Refusing to close tag {tag}, no tags left to be closed",
        )
    return Diagnostic(
        DiagnosticKind.NESTING,
        f"Refusing to close tag {tag}, unclosed tags remaining",
    )


def tag_not_found(tag: str, *, stack_was_empty: bool) -> Diagnostic:
    kind = DiagnosticKind.EMPTY_STACK if stack_was_empty else DiagnosticKind.NESTING
    return Diagnostic(kind, f"Hit end of tag stack while searching for tag {tag} to close")


def unclosed_tags(tags: Iterable[str]) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.UNCLOSED, "Unclosed tags remaining: " + " ".join(tags)
    )


class DiagnosticSink:
    """Destination for diagnostics; subclasses decide what reporting means."""

    def report(self, diagnostic: Diagnostic) -> None:
        raise NotImplementedError


class StreamDiagnostics(DiagnosticSink):
    """Write each diagnostic as one line to a text stream (e.g. stderr)."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def report(self, diagnostic: Diagnostic) -> None:
        self.stream.write(f"{diagnostic.message}\n")


@dataclass
class DiagnosticLog(DiagnosticSink):
    """Collect diagnostics in memory, optionally echoing them to a stream."""

    forward: Optional[TextIO] = None
    entries: List[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.entries.append(diagnostic)
        if self.forward is not None:
            self.forward.write(f"{diagnostic.message}\n")

    def kinds(self) -> List[DiagnosticKind]:
        return [entry.kind for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "DiagnosticSink",
    "StreamDiagnostics",
    "missing_tag",
    "nameless_attr",
    "refused_close",
    "tag_not_found",
    "unclosed_tags",
]
