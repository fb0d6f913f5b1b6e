"""Template document model — the parsed node tree this compiler lowers.

The upstream parser emits a JSON document (one object per node, with a
``type`` discriminant and ``line`` / ``column`` / ``filename`` position
fields).  ``load_template`` / ``node_from_dict`` turn that document into
the typed node classes below; node kinds this compiler has no class for
become ``UnknownNode`` so the lowering pass can report them.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class TemplateLoadError(Exception):
    """Raised when a parser document cannot be turned into a node tree."""

    pass


class SourcePosition(BaseModel):
    """Position of a template node in its source file."""

    line: int = 0
    column: int = 0
    filename: str | None = None

    def is_unknown(self) -> bool:
        return self.line == 0 and self.column == 0

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        prefix = f"{self.filename}:" if self.filename else ""
        return f"{prefix}{self.line}:{self.column}"


NO_SOURCE_POSITION = SourcePosition()


class TemplateNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str
    line: int | None = None
    column: int | None = None
    filename: str | None = None


class TagAttribute(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    val: str | bool = True
    must_escape: bool = Field(default=True, alias="mustEscape")


class BlockNode(TemplateNode):
    type: Literal["Block"] = "Block"
    nodes: list[TemplateNode] = []


class TagNode(TemplateNode):
    type: Literal["Tag"] = "Tag"
    name: str
    attrs: list[TagAttribute] = []
    attribute_blocks: list[str] = Field(default=[], alias="attributeBlocks")
    block: BlockNode | None = None
    self_closing: bool = Field(default=False, alias="selfClosing")

    @field_validator("attribute_blocks", mode="before")
    @classmethod
    def _attribute_block_values(cls, value: Any) -> Any:
        # Newer parsers emit {type: "AttributeBlock", val: ...} objects
        if isinstance(value, list):
            return [v.get("val", "") if isinstance(v, dict) else v for v in value]
        return value


class CodeNode(TemplateNode):
    type: Literal["Code"] = "Code"
    val: str = ""
    buffer: bool = False
    must_escape: bool = Field(default=True, alias="mustEscape")
    is_inline: bool = Field(default=False, alias="isInline")
    block: BlockNode | None = None


class TextNode(TemplateNode):
    type: Literal["Text"] = "Text"
    val: str = ""


class WhenNode(TemplateNode):
    type: Literal["When"] = "When"
    expr: str
    block: BlockNode | None = None


class CaseNode(TemplateNode):
    type: Literal["Case"] = "Case"
    expr: str
    block: BlockNode = BlockNode()


class ConditionalNode(TemplateNode):
    type: Literal["Conditional"] = "Conditional"
    test: str
    consequent: BlockNode = BlockNode()
    alternate: Union[BlockNode, "ConditionalNode", None] = None


class EachNode(TemplateNode):
    type: Literal["Each"] = "Each"
    obj: str
    val: str
    key: str | None = None
    block: BlockNode = BlockNode()
    alternate: BlockNode | None = None


class UnknownNode(TemplateNode):
    """Any node kind without a dedicated class (Comment, Doctype, Mixin, ...)."""

    pass


ConditionalNode.model_rebuild()


def extract_pos_info(node: TemplateNode) -> SourcePosition:
    return SourcePosition(
        line=node.line or 0,
        column=node.column or 0,
        filename=node.filename,
    )


_NODE_CLASSES: dict[str, type[TemplateNode]] = {
    "Block": BlockNode,
    "Tag": TagNode,
    "Code": CodeNode,
    "Text": TextNode,
    "Case": CaseNode,
    "When": WhenNode,
    "Conditional": ConditionalNode,
    "Each": EachNode,
}

# Fields holding a single nested node, per node kind
_CHILD_FIELDS: dict[str, tuple[str, ...]] = {
    "Block": (),
    "Tag": ("block",),
    "Code": ("block",),
    "Text": (),
    "Case": ("block",),
    "When": ("block",),
    "Conditional": ("consequent", "alternate"),
    "Each": ("block", "alternate"),
}


def node_from_dict(data: dict[str, Any]) -> TemplateNode:
    """Build a typed node tree from one parser-emitted JSON object.

    Raises ``TemplateLoadError`` when *data* is not a node object or when a
    known node kind is missing required fields.
    """
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise TemplateLoadError(f"Not a template node: {data!r:.80}")
    node_type = data["type"]
    cls = _NODE_CLASSES.get(node_type)
    if cls is None:
        logger.debug("No node class for %s, keeping it as UnknownNode", node_type)
        return UnknownNode.model_validate(data)

    fields = dict(data)
    if node_type == "Block":
        fields["nodes"] = [node_from_dict(n) for n in data.get("nodes", [])]
    for name in _CHILD_FIELDS[node_type]:
        child = data.get(name)
        if child is not None:
            fields[name] = node_from_dict(child)
    try:
        return cls.model_validate(fields)
    except ValidationError as exc:
        raise TemplateLoadError(f"Invalid {node_type} node: {exc}") from exc


def load_template(text: str) -> TemplateNode:
    """Parse a parser JSON document into its root node."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TemplateLoadError(f"Template document is not valid JSON: {exc}") from exc
    return node_from_dict(data)
