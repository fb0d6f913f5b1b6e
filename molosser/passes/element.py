"""ElementTransformer — markup tags to JSX elements."""

from __future__ import annotations

import logging
import re

from ._base import NestedTransformer
from .. import constants
from ..jsx import JsxAttribute, OutputKind, OutputNode
from ..template import TagAttribute, TagNode, extract_pos_info

logger = logging.getLogger(__name__)


_STRING_LITERAL = re.compile(r"'(?:[^'\\\n]|\\.)*'|\"(?:[^\"\\\n]|\\.)*\"", re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES: dict[str, str] = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def _string_literal_value(source: str) -> str | None:
    """Return the value of *source* if it is one complete JS string literal."""
    if not _STRING_LITERAL.fullmatch(source):
        return None
    return _ESCAPE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), source[1:-1])


def _to_jsx_attribute(name: str, value: str | bool) -> JsxAttribute:
    if value is True or value == constants.TRUE_LITERAL:
        return JsxAttribute(name=name)
    source = str(value).strip()
    literal = _string_literal_value(source)
    # JSX string attributes cannot escape a double quote
    if literal is not None and '"' not in literal:
        return JsxAttribute(name=name, value=literal)
    return JsxAttribute(name=name, value=source, is_expression=True)


def _merge_class_attributes(name: str, attrs: list[TagAttribute]) -> JsxAttribute:
    """Collapse repeated ``class`` attributes (``.a.b(class=x)``) into one."""
    values = [str(a.val).strip() for a in attrs]
    literals = [_string_literal_value(v) for v in values]
    if all(lit is not None and '"' not in lit for lit in literals):
        return JsxAttribute(name=name, value=" ".join(literals))
    return JsxAttribute(
        name=name,
        value=f"[{', '.join(values)}].join(\" \")",
        is_expression=True,
    )


class ElementTransformer(NestedTransformer[TagNode, OutputNode]):
    def transform(self) -> None:
        node = self.input
        if node.attribute_blocks:
            self.push_error("&attributes is not supported")
            return
        self.output = OutputNode(
            kind=OutputKind.JSX_ELEMENT,
            name=node.name,
            attributes=self._lower_attributes(node),
            children=self.lower_block(node.block),
            source_location=extract_pos_info(node),
        )

    def _lower_attributes(self, node: TagNode) -> list[JsxAttribute]:
        renames = dict(self.context.config.attribute_renames)
        class_attrs = [a for a in node.attrs if a.name == constants.CLASS_ATTR]
        attributes: list[JsxAttribute] = []
        for attr in node.attrs:
            name = renames.get(attr.name, attr.name)
            if attr.name != constants.CLASS_ATTR:
                attributes.append(_to_jsx_attribute(name, attr.val))
            elif attr is class_attrs[0]:
                # First occurrence carries every class value, in order
                if len(class_attrs) == 1:
                    attributes.append(_to_jsx_attribute(name, attr.val))
                else:
                    attributes.append(_merge_class_attributes(name, class_attrs))
        return attributes
