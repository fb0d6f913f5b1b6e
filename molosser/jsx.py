"""Output AST — the TSX render-tree nodes the lowering passes produce."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .template import NO_SOURCE_POSITION, SourcePosition


class OutputKind(str, Enum):
    # Render tree
    JSX_ELEMENT = "JSX_ELEMENT"
    JSX_FRAGMENT = "JSX_FRAGMENT"
    JSX_TEXT = "JSX_TEXT"
    JSX_EXPRESSION = "JSX_EXPRESSION"
    # Control flow
    CONDITIONAL = "CONDITIONAL"
    ITERATION = "ITERATION"
    SWITCH = "SWITCH"
    SWITCH_CASE = "SWITCH_CASE"
    # Module level
    STATEMENT = "STATEMENT"
    # Special
    NULL = "NULL"


class JsxAttribute(BaseModel):
    """One attribute of a JSX element.

    ``value`` is the literal string for string attributes, the expression
    source for expression attributes, and ``None`` for bare boolean ones.
    """

    name: str
    value: str | None = None
    is_expression: bool = False

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        if self.is_expression:
            return f"{self.name}={{{self.value}}}"
        return f'{self.name}="{self.value}"'


class OutputNode(BaseModel):
    kind: OutputKind
    name: str | None = None
    value: str | None = None
    attributes: list[JsxAttribute] = []
    params: list[str] = []
    children: list[OutputNode] = []
    source_location: SourcePosition = NO_SOURCE_POSITION

    def __str__(self) -> str:
        return _render(self)


def jsx_text(value: str, source_location: SourcePosition = NO_SOURCE_POSITION) -> OutputNode:
    return OutputNode(kind=OutputKind.JSX_TEXT, value=value, source_location=source_location)


def jsx_fragment(children: list[OutputNode]) -> OutputNode:
    return OutputNode(kind=OutputKind.JSX_FRAGMENT, children=children)


def null_literal() -> OutputNode:
    return OutputNode(kind=OutputKind.NULL)


def _render_children(children: list[OutputNode]) -> str:
    return "".join(_render_child(c) for c in children)


def _render_child(node: OutputNode) -> str:
    """Render *node* in JSX child position (non-JSX nodes need braces)."""
    if node.kind in (
        OutputKind.JSX_ELEMENT,
        OutputKind.JSX_FRAGMENT,
        OutputKind.JSX_TEXT,
        OutputKind.JSX_EXPRESSION,
    ):
        return _render(node)
    return f"{{{_render(node)}}}"


def _render(node: OutputNode) -> str:
    kind = node.kind
    if kind == OutputKind.JSX_TEXT:
        return node.value or ""
    if kind == OutputKind.JSX_EXPRESSION:
        return f"{{{node.value}}}"
    if kind == OutputKind.STATEMENT:
        return node.value or ""
    if kind == OutputKind.NULL:
        return "null"
    if kind == OutputKind.JSX_FRAGMENT:
        return f"<>{_render_children(node.children)}</>"
    if kind == OutputKind.JSX_ELEMENT:
        attrs = "".join(f" {a}" for a in node.attributes)
        if not node.children:
            return f"<{node.name}{attrs} />"
        return f"<{node.name}{attrs}>{_render_children(node.children)}</{node.name}>"
    if kind == OutputKind.CONDITIONAL:
        consequent, alternate = node.children
        return f"({node.value}) ? {_render(consequent)} : {_render(alternate)}"
    if kind == OutputKind.ITERATION:
        body = _render(node.children[0])
        mapped = f"({node.value}).map(({', '.join(node.params)}) => {body})"
        if len(node.children) > 1:
            alternate = _render(node.children[1])
            return f"({node.value}).length ? {mapped} : {alternate}"
        return mapped
    if kind == OutputKind.SWITCH:
        cases = " ".join(_render(c) for c in node.children)
        return f"(() => {{ switch ({node.value}) {{ {cases} }} }})()"
    if kind == OutputKind.SWITCH_CASE:
        label = "default:" if node.value is None else f"case {node.value}:"
        if not node.children:
            return label
        return f"{label} return {_render(node.children[0])};"
    return f"/* {kind.value} */"
