"""EachTransformer — ``each`` loops to ``.map()`` calls."""

from __future__ import annotations

from ._base import NestedTransformer
from ..jsx import OutputKind, OutputNode, jsx_fragment
from ..template import EachNode, extract_pos_info


class EachTransformer(NestedTransformer[EachNode, OutputNode]):
    """The optional ``else`` block renders when the collection is empty."""

    def transform(self) -> None:
        node = self.input
        params = [node.val] + ([node.key] if node.key else [])
        children = [jsx_fragment(self.lower_block(node.block))]
        if node.alternate is not None:
            children.append(jsx_fragment(self.lower_block(node.alternate)))
        self.output = OutputNode(
            kind=OutputKind.ITERATION,
            value=node.obj,
            params=params,
            children=children,
            source_location=extract_pos_info(node),
        )
