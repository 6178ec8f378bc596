"""Stack of currently open tags, innermost on top."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class _TagNode:
    tag: str
    next: Optional["_TagNode"] = None


class TagStack:
    """Singly linked LIFO of open tag names.

    Reading the stack top to bottom mirrors the ``open`` calls that have not
    been matched by a ``close`` yet, most recent first.
    """

    def __init__(self) -> None:
        self._head: Optional[_TagNode] = None
        self._size = 0

    def push(self, tag: str) -> None:
        self._head = _TagNode(tag=str(tag), next=self._head)
        self._size += 1

    def pop(self) -> str:
        node = self._head
        if node is None:
            raise IndexError("pop from empty tag stack")
        self._head = node.next
        node.next = None
        self._size -= 1
        return node.tag

    def peek(self) -> Optional[str]:
        return self._head.tag if self._head is not None else None

    def clear(self) -> None:
        """Release every node, unlinking them one at a time."""

        node = self._head
        self._head = None
        self._size = 0
        while node is not None:
            next_node = node.next
            node.next = None
            node = next_node

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.tag
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __contains__(self, tag: object) -> bool:
        return any(open_tag == tag for open_tag in self)

    def __repr__(self) -> str:
        return f"TagStack({list(self)!r})"


__all__ = ["TagStack"]
