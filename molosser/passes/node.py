"""NodeLoweringPass — kind dispatch over template nodes."""

from __future__ import annotations

import logging
from typing import Callable

from ._base import NestedTransformer, Transformer
from .case import CaseTransformer
from .code import CodeTransformer
from .conditional import ConditionalTransformer
from .each import EachTransformer
from .element import ElementTransformer
from .script import ScriptTransformer
from .. import constants
from ..jsx import OutputNode, jsx_text
from ..template import (
    BlockNode,
    CaseNode,
    CodeNode,
    ConditionalNode,
    EachNode,
    TagNode,
    TemplateNode,
    TextNode,
    extract_pos_info,
)

logger = logging.getLogger(__name__)


class NodeLoweringPass(Transformer[TemplateNode, list[OutputNode]]):
    """Lowers one template node into zero or more output nodes.

    Subclasses may swap any specialized pass by overriding the ``*_PASS``
    class attributes; nested lowering reuses ``type(self)`` so the override
    applies to the whole tree.
    """

    # ── overridable delegates ────────────────────────────────────

    ELEMENT_PASS: type[Transformer] = ElementTransformer
    SCRIPT_PASS: type[Transformer] = ScriptTransformer
    CODE_PASS: type[Transformer] = CodeTransformer
    CASE_PASS: type[Transformer] = CaseTransformer
    CONDITIONAL_PASS: type[Transformer] = ConditionalTransformer
    EACH_PASS: type[Transformer] = EachTransformer

    # ── options ──────────────────────────────────────────────────

    is_top_level: bool = False
    is_document_root: bool = False

    def __init__(self, input: TemplateNode, context, **options):
        super().__init__(input, context, **options)
        self._DISPATCH: dict[type[TemplateNode], Callable] = {
            TagNode: self._lower_tag,
            BlockNode: self._lower_block_node,
            CodeNode: self._lower_code,
            TextNode: self._lower_text,
            CaseNode: self._lower_control_flow,
            ConditionalNode: self._lower_control_flow,
            EachNode: self._lower_control_flow,
        }
        self._CONTROL_FLOW_PASSES: dict[type[TemplateNode], type[Transformer]] = {
            CaseNode: self.CASE_PASS,
            ConditionalNode: self.CONDITIONAL_PASS,
            EachNode: self.EACH_PASS,
        }

    def transform(self) -> None:
        node = self.input
        handler = self._DISPATCH.get(type(node))
        if handler is None:
            self.push_error(
                f"node type {node.type} is currently not supported",
                maybe_bug=True,
                is_fatal=False,
            )
            return
        handler(node)

    # ── delegation helpers ───────────────────────────────────────

    def _nested(self, transformer_cls: type[Transformer], node: TemplateNode, **options):
        if issubclass(transformer_cls, NestedTransformer):
            options["node_pass"] = type(self)
        return self.delegate_to(transformer_cls, node, **options)

    # ── per-kind lowering ────────────────────────────────────────

    def _lower_tag(self, node: TagNode) -> None:
        config = self.context.config
        if node.name in config.disallowed_tags:
            self.push_error(f"{node.name} is not supported")
            return
        if node.name == config.script_tag:
            self._lower_script(node)
            return
        transformed = self._nested(self.ELEMENT_PASS, node)
        self.output = [transformed] if transformed is not None else None

    def _lower_block_node(self, node: BlockNode) -> None:
        lowered = [
            self.delegate_to(type(self), child, is_top_level=self.is_document_root)
            for child in node.nodes
        ]
        self.output = [out for result in lowered if result for out in result]

    def _lower_code(self, node: CodeNode) -> None:
        self.output = self._nested(self.CODE_PASS, node, is_expression=node.buffer)

    def _lower_text(self, node: TextNode) -> None:
        self.output = [jsx_text(node.val, extract_pos_info(node))]

    def _lower_control_flow(self, node: TemplateNode) -> None:
        transformed = self._nested(self._CONTROL_FLOW_PASSES[type(node)], node)
        if transformed is not None:
            self.output = [transformed]

    # ── script elements ──────────────────────────────────────────

    def _lower_script(self, node: TagNode) -> None:
        config = self.context.config
        if any(a.name == constants.SCRIPT_SRC_ATTR for a in node.attrs):
            self.push_error("External script tags are currently not supported")
            return
        type_attr = next((a for a in node.attrs if a.name == constants.SCRIPT_TYPE_ATTR), None)
        script_type = (
            _strip_quotes(str(type_attr.val)) if type_attr else config.primary_script_type
        )
        if type_attr and script_type not in (
            config.primary_script_type,
            config.template_script_type,
        ):
            self.push_error(
                f"Currently only scripts of type {config.primary_script_type} "
                f"and {config.template_script_type} are supported"
            )
            return
        if not self.is_top_level:
            self.push_error(f"node of type {node.type} is currently only supported at top level")
            return
        if (
            script_type == config.primary_script_type
            and node.block is not None
            and any(not isinstance(n, TextNode) for n in node.block.nodes)
        ):
            # Recorded but not terminating: the literal text is still hoisted
            self.push_error("script or style tags can have only text nodes")
        if script_type == config.primary_script_type:
            statements = self.delegate_to(self.SCRIPT_PASS, node) or []
            self.context.top_level_statements.extend(s for s in statements if s is not None)
        elif script_type == config.template_script_type and node.block is not None:
            statements = self.delegate_to(type(self), node.block) or []
            self.context.top_level_statements.extend(s for s in statements if s is not None)
        logger.debug(
            "Hoisted %s script content; %d top-level statements so far",
            script_type,
            len(self.context.top_level_statements),
        )
        self.output = []


def _strip_quotes(value: str) -> str:
    """Strip one layer of surrounding ' or " quotes."""
    if value[:1] in ("'", '"'):
        value = value[1:]
    if value[-1:] in ("'", '"'):
        value = value[:-1]
    return value
