"""Sample HTML5 page written with the XmlContext operations."""

from __future__ import annotations

from .context import XmlContext

TABLE_ROWS = [
    "+-----+--------------------+\n",
    "| wow | this aligns right! |\n",
    "+-----+--------------------+\n",
]


def write_example_page(ctx: XmlContext) -> None:
    """Write a small page exercising escaping and the closing helpers.

    Use a context with ``closing_slash=False`` for HTML5 output.
    """

    ctx.raw("<!doctype html>")
    ctx.open_tag_attrs("html", [("lang", "en")])
    ctx.open_tag("head")
    ctx.empty_tag("meta", [("charset", "utf-8")])
    ctx.open_tag("title")
    ctx.escaped("lol this is my site")
    ctx.close_including("head")

    ctx.open_tag("body")
    ctx.open_tag("header")
    ctx.open_tag("h1")
    ctx.escaped(">>sophisticated<< technology")
    ctx.close_including("header")

    ctx.open_tag("main")
    ctx.open_tag_attrs("article", [("id", "article-1")])
    ctx.open_tag("h2")
    ctx.escaped("i was joking")
    ctx.close_tag("h2")
    ctx.open_tag("p")
    ctx.escaped("it really was only a joke, i was leading you on!")
    ctx.close_including("article")

    ctx.open_tag_attrs(
        "article",
        [("id", "article-2"), ("data-meta", '{ "type" : "preformatted" }')],
    )
    ctx.open_tag("h2")
    ctx.escaped("table test")
    ctx.close_tag("h2")
    ctx.open_tag("pre")
    for row in TABLE_ROWS:
        ctx.escaped(row)
    ctx.close_including("article")

    ctx.open_tag_attrs("article", [("id", "article-3")])
    ctx.open_tag("h2")
    ctx.escaped('escaping "test"')
    ctx.close_tag("h2")
    ctx.escaped("&<>\"'")
    ctx.close_all()


__all__ = ["write_example_page"]
