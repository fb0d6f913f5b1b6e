"""CodeTransformer — embedded code fragments to expressions or statements."""

from __future__ import annotations

from ._base import Transformer
from ..jsx import OutputKind, OutputNode
from ..template import CodeNode, extract_pos_info


class CodeTransformer(Transformer[CodeNode, list[OutputNode]]):
    """Buffered code renders as a JSX expression; unbuffered code is a statement."""

    is_expression: bool = False

    def transform(self) -> None:
        node = self.input
        if node.block is not None:
            self.push_error("code blocks are not supported")
            return
        source = node.val.strip()
        if not source:
            return
        kind = OutputKind.JSX_EXPRESSION if self.is_expression else OutputKind.STATEMENT
        self.output = [
            OutputNode(kind=kind, value=source, source_location=extract_pos_info(node))
        ]
