"""Pydantic models for serializer configuration and document files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .dom_model import DomContent, DomNode


class SerializerConfig(BaseModel):
    """Settings applied to the XmlContext used for a document."""

    closing_slash: bool = Field(
        True,
        alias="closingSlash",
        description="Write empty tags as <tag/> (XML) instead of <tag> (HTML5).",
    )
    warnings: bool = Field(
        False, description="Report nesting and argument problems on stderr."
    )
    doctype: Optional[str] = Field(
        None,
        description="Raw prologue written before the first node, e.g. '<!doctype html>'.",
    )

    model_config = ConfigDict(populate_by_name=True)


class NodeSpec(BaseModel):
    """Element in a document file."""

    tag: str = Field(..., min_length=1, description="Tag name, written as-is.")
    attrs: List[Tuple[str, Optional[str]]] = Field(
        default_factory=list,
        description="Ordered attributes; a null value gives a valueless attribute.",
    )
    children: List[Union["NodeSpec", str]] = Field(
        default_factory=list, description="Child elements and text strings."
    )
    text: Optional[str] = Field(None, description="Text written escaped.")
    raw: Optional[str] = Field(None, description="Trusted markup written verbatim.")
    cdata: Optional[str] = Field(None, description="Content of a CDATA section.")
    empty: bool = Field(False, description="Write as an empty/void element.")

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("attrs", mode="before")
    @classmethod
    def _attrs_from_mapping(cls, value: object) -> object:
        if isinstance(value, dict):
            return list(value.items())
        return value

    def to_dom(self) -> DomNode:
        children: List[DomContent] = [
            child.to_dom() if isinstance(child, NodeSpec) else child
            for child in self.children
        ]
        return DomNode(
            tag=self.tag,
            attrs=list(self.attrs),
            children=children,
            text=self.text,
            raw_html=self.raw,
            cdata=self.cdata,
            empty=self.empty,
        )


NodeSpec.model_rebuild()


class DocumentSpec(BaseModel):
    """Top-level document file: serializer settings plus the node list."""

    config: SerializerConfig = Field(default_factory=SerializerConfig)
    nodes: List[Union[NodeSpec, str]] = Field(default_factory=list)

    def to_dom(self) -> List[DomContent]:
        return [node.to_dom() if isinstance(node, NodeSpec) else node for node in self.nodes]


def load_document(path: Path) -> DocumentSpec:
    """Load and validate a YAML document file."""

    if not path.exists():
        raise SystemExit(f"Document not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise SystemExit(f"{path} must contain a mapping with 'config' and 'nodes'.")
        return DocumentSpec.model_validate(data)
    except (yaml.YAMLError, ValidationError) as exc:
        raise SystemExit(f"Invalid document file {path}: {exc}") from exc


__all__ = ["DocumentSpec", "NodeSpec", "SerializerConfig", "load_document"]
