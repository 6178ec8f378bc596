from pathlib import Path

import pytest

from markupgen.dom_model import DomNode, dom_to_markup
from markupgen.models import DocumentSpec, NodeSpec, SerializerConfig, load_document


def test_serializer_config_defaults():
    config = SerializerConfig()
    assert config.closing_slash is True
    assert config.warnings is False
    assert config.doctype is None


def test_serializer_config_accepts_camel_case_alias():
    config = SerializerConfig.model_validate({"closingSlash": False})
    assert config.closing_slash is False


def test_node_spec_attrs_from_mapping_and_pairs():
    from_mapping = NodeSpec.model_validate({"tag": "meta", "attrs": {"charset": "utf-8"}})
    from_pairs = NodeSpec.model_validate({"tag": "input", "attrs": [["checked", None]]})
    assert from_mapping.attrs == [("charset", "utf-8")]
    assert from_pairs.attrs == [("checked", None)]


def test_node_spec_to_dom_recurses():
    spec = NodeSpec.model_validate(
        {"tag": "p", "children": ["a", {"tag": "b", "text": "c"}], "attrs": [["id", "x"]]}
    )
    node = spec.to_dom()
    assert node == DomNode(
        tag="p",
        attrs=[("id", "x")],
        children=["a", DomNode(tag="b", text="c")],
    )


def test_load_document(tmp_path: Path):
    path = tmp_path / "doc.yaml"
    path.write_text(
        "config:\n"
        "  closing_slash: false\n"
        "nodes:\n"
        "  - tag: div\n"
        "    children:\n"
        "      - tag: hr\n"
        "        empty: true\n",
        encoding="utf-8",
    )
    document = load_document(path)
    assert isinstance(document, DocumentSpec)
    assert document.config.closing_slash is False
    assert dom_to_markup(document.to_dom(), closing_slash=False) == "<div><hr></div>"


def test_load_document_rejects_invalid_files(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("nodes:\n  - attrs: [[a, b]]\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        load_document(path)
    assert "Invalid document file" in str(excinfo.value)


def test_load_document_missing_file(tmp_path: Path):
    with pytest.raises(SystemExit):
        load_document(tmp_path / "missing.yaml")


def test_sample_config_is_valid():
    document = load_document(Path("config/page.yaml"))
    assert document.config.doctype == "<!doctype html>"
    assert document.nodes


def test_load_document_accepts_unquoted_numbers(tmp_path: Path):
    path = tmp_path / "table.yaml"
    path.write_text(
        "nodes:\n"
        "  - tag: td\n"
        "    attrs: {colspan: 2}\n"
        "    text: 42\n"
        "    children: [7]\n",
        encoding="utf-8",
    )
    document = load_document(path)
    assert dom_to_markup(document.to_dom()) == '<td colspan="2">427</td>'
