"""Per-compile shared state threaded through every lowering pass."""

from __future__ import annotations

from dataclasses import dataclass, field

from .diagnostics import DiagnosticSink
from .jsx import OutputNode
from .lowering_types import LoweringConfig
from .parser import ScriptParser, TreeSitterParserFactory


@dataclass
class CompilationContext:
    """One instance per top-level compile; never shared between compiles.

    ``top_level_statements`` is append-only and keeps discovery order.
    """

    sink: DiagnosticSink = field(default_factory=DiagnosticSink)
    config: LoweringConfig = field(default_factory=LoweringConfig)
    script_parser: ScriptParser = field(
        default_factory=lambda: ScriptParser(TreeSitterParserFactory())
    )
    top_level_statements: list[OutputNode] = field(default_factory=list)
