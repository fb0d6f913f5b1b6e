"""ConditionalTransformer — if / else if / else chains to ternaries."""

from __future__ import annotations

from ._base import NestedTransformer
from ..jsx import OutputKind, OutputNode, jsx_fragment, null_literal
from ..template import BlockNode, ConditionalNode, extract_pos_info


class ConditionalTransformer(NestedTransformer[ConditionalNode, OutputNode]):
    def transform(self) -> None:
        self.output = self._lower_conditional(self.input)

    def _lower_conditional(self, node: ConditionalNode) -> OutputNode:
        return OutputNode(
            kind=OutputKind.CONDITIONAL,
            value=node.test,
            children=[
                jsx_fragment(self.lower_block(node.consequent)),
                self._lower_alternate(node.alternate),
            ],
            source_location=extract_pos_info(node),
        )

    def _lower_alternate(self, alternate: BlockNode | ConditionalNode | None) -> OutputNode:
        if alternate is None:
            return null_literal()
        if isinstance(alternate, ConditionalNode):
            return self._lower_conditional(alternate)
        return jsx_fragment(self.lower_block(alternate))
