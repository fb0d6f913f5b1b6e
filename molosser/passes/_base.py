"""Transformer — shared machinery for lowering one template node."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..context import CompilationContext
from ..diagnostics import Diagnostic, ErrorCode
from ..template import SourcePosition, TemplateNode, extract_pos_info

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=TemplateNode)
OutputT = TypeVar("OutputT")


class Transformer(ABC, Generic[InputT, OutputT]):
    """Base class for every lowering pass.

    A pass is built from one template (sub)node and the shared
    ``CompilationContext``.  ``transform()`` populates ``output`` (left as
    ``None`` when the node produces nothing) and may push diagnostics or
    hoist statements through the context.  Context side effects are never
    rolled back.
    """

    def __init__(self, input: InputT, context: CompilationContext, **options: Any):
        self.input = input
        self.context = context
        self.output: OutputT | None = None
        for name, value in options.items():
            if not hasattr(self, name):
                raise TypeError(f"{type(self).__name__} has no option {name!r}")
            setattr(self, name, value)

    @abstractmethod
    def transform(self) -> None: ...

    def delegate_to(self, transformer_cls: type[Transformer], node: TemplateNode, **options: Any):
        """Run a child pass for *node* on the same context and return its output."""
        child = transformer_cls(node, self.context, **options)
        child.transform()
        return child.output

    def push_error(
        self,
        reason: str,
        *,
        node: TemplateNode | None = None,
        code: ErrorCode = ErrorCode.UnsupportedSyntaxError,
        maybe_bug: bool = False,
        is_fatal: bool = True,
        position: SourcePosition | None = None,
    ) -> None:
        self.context.sink.push(
            Diagnostic(
                code=code,
                reasons=[reason],
                maybe_bug=maybe_bug,
                is_fatal=is_fatal,
                position=(
                    position
                    if position is not None
                    else extract_pos_info(node if node is not None else self.input)
                ),
            )
        )


class NestedTransformer(Transformer[InputT, OutputT]):
    """A pass whose node owns child blocks lowered by the node pass.

    ``node_pass`` is the orchestrator class to lower children with; the
    orchestrator hands in its own class so overrides carry down the tree.
    """

    node_pass: type[Transformer] | None = None

    def lower_block(self, block: TemplateNode | None) -> list:
        if block is None:
            return []
        node_pass = self.node_pass
        if node_pass is None:
            from .node import NodeLoweringPass

            node_pass = NodeLoweringPass
        return self.delegate_to(node_pass, block) or []
