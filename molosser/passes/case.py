"""CaseTransformer — ``case`` / ``when`` to a switch expression."""

from __future__ import annotations

import logging

from ._base import NestedTransformer
from .. import constants
from ..jsx import OutputKind, OutputNode, jsx_fragment
from ..template import CaseNode, WhenNode, extract_pos_info

logger = logging.getLogger(__name__)


class CaseTransformer(NestedTransformer[CaseNode, OutputNode]):
    """Each ``when`` becomes a SWITCH_CASE; a ``when`` without a block falls through."""

    def transform(self) -> None:
        node = self.input
        branches = node.block.nodes
        stray = next((b for b in branches if not isinstance(b, WhenNode)), None)
        if stray is not None:
            self.push_error(f"node type {stray.type} is not supported inside case", node=stray)
            return
        defaults = [b for b in branches if b.expr == constants.DEFAULT_CASE_EXPR]
        if len(defaults) > 1:
            self.push_error("case can have only one default branch", node=defaults[1])
            return
        self.output = OutputNode(
            kind=OutputKind.SWITCH,
            value=node.expr,
            children=[self._lower_when(b) for b in branches],
            source_location=extract_pos_info(node),
        )

    def _lower_when(self, node: WhenNode) -> OutputNode:
        is_default = node.expr == constants.DEFAULT_CASE_EXPR
        children = [jsx_fragment(self.lower_block(node.block))] if node.block is not None else []
        return OutputNode(
            kind=OutputKind.SWITCH_CASE,
            value=None if is_default else node.expr,
            children=children,
            source_location=extract_pos_info(node),
        )
