import io

from markupgen.context import XmlContext
from markupgen.diagnostics import DiagnosticLog
from markupgen.dom_model import DomNode, dom_to_markup, write_dom


def test_dom_to_markup_nested_tree():
    tree = [
        DomNode(
            tag="ul",
            attrs=[("class", "posts")],
            children=[
                DomNode(tag="li", text="one & two"),
                DomNode(tag="li", children=["plain ", DomNode(tag="b", text="bold")]),
            ],
        )
    ]
    assert dom_to_markup(tree) == (
        '<ul class="posts"><li>one &amp; two</li><li>plain <b>bold</b></li></ul>'
    )


def test_dom_empty_nodes_follow_closing_slash():
    tree = [DomNode(tag="p", children=[DomNode(tag="br", empty=True)])]
    assert dom_to_markup(tree) == "<p><br/></p>"
    assert dom_to_markup(tree, closing_slash=False) == "<p><br></p>"


def test_dom_raw_and_cdata_are_not_escaped():
    tree = [
        DomNode(tag="div", raw_html="<em>trusted</em>"),
        DomNode(tag="content", cdata="<p>x & y</p>"),
    ]
    assert dom_to_markup(tree) == (
        "<div><em>trusted</em></div><content><![CDATA[<p>x & y</p>]]></content>"
    )


def test_write_dom_leaves_context_balanced():
    out = io.StringIO()
    log = DiagnosticLog()
    ctx = XmlContext(out=out, warn=log)
    ctx.open_tag("body")
    write_dom(ctx, [DomNode(tag="h1", text="Title"), "tail"])
    assert ctx.open_tags == ("body",)
    ctx.close_all()
    ctx.teardown()
    assert out.getvalue() == "<body><h1>Title</h1>tail</body>"
    assert not log


def test_raw_html_takes_precedence_over_text():
    tree = [DomNode(tag="div", text="ignored", raw_html="<i>kept</i>")]
    assert dom_to_markup(tree) == "<div><i>kept</i></div>"
