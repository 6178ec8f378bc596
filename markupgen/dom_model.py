"""Simple element tree written through an XmlContext."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import List, Sequence

from .attrs import Attr
from .context import XmlContext


@dataclass
class DomNode:
    """Element to write; ``raw_html`` takes precedence and ``text`` is then ignored."""

    tag: str
    attrs: List[Attr] = field(default_factory=list)
    children: List["DomContent"] = field(default_factory=list)
    text: str | None = None
    raw_html: str | None = None
    cdata: str | None = None
    empty: bool = False


DomContent = DomNode | str


def _write_node(ctx: XmlContext, node: DomNode) -> None:
    if node.empty:
        ctx.empty_tag(node.tag, node.attrs)
        return
    ctx.open_tag_attrs(node.tag, node.attrs)
    if node.raw_html is not None:
        # Raw HTML insertion assumes content is trusted.
        ctx.raw(node.raw_html)
    elif node.text is not None:
        ctx.escaped(node.text)
    if node.cdata is not None:
        ctx.cdata_open()
        ctx.raw(node.cdata)
        ctx.cdata_close()
    write_dom(ctx, node.children)
    ctx.close_tag(node.tag)


def write_dom(ctx: XmlContext, nodes: Sequence[DomContent]) -> None:
    for node in nodes:
        if isinstance(node, DomNode):
            _write_node(ctx, node)
        else:
            ctx.escaped(str(node))


def dom_to_markup(nodes: Sequence[DomContent], *, closing_slash: bool = True) -> str:
    buffer = io.StringIO()
    with XmlContext(out=buffer, closing_slash=closing_slash) as ctx:
        write_dom(ctx, nodes)
    return buffer.getvalue()


__all__ = ["DomContent", "DomNode", "dom_to_markup", "write_dom"]
