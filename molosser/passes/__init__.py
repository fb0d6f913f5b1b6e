"""Lowering passes: the node dispatcher plus one pass per specialized node kind."""

from __future__ import annotations

from ._base import NestedTransformer, Transformer
from .case import CaseTransformer
from .code import CodeTransformer
from .conditional import ConditionalTransformer
from .each import EachTransformer
from .element import ElementTransformer
from .node import NodeLoweringPass
from .script import ScriptTransformer

__all__ = [
    "Transformer",
    "NestedTransformer",
    "NodeLoweringPass",
    "ElementTransformer",
    "ScriptTransformer",
    "CodeTransformer",
    "CaseTransformer",
    "ConditionalTransformer",
    "EachTransformer",
]
