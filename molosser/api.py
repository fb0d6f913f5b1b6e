"""Composable API functions for the template lowering pipeline.

Each function corresponds to a CLI workflow (default dump, --json, --stats)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from typing import Optional

from .context import CompilationContext
from .lowering_types import LoweringConfig, LoweringResult
from .output_stats import count_kinds
from .passes import NodeLoweringPass
from .template import TemplateNode, load_template

logger = logging.getLogger(__name__)


def lower_document(
    root: TemplateNode,
    config: Optional[LoweringConfig] = None,
    node_pass: type[NodeLoweringPass] = NodeLoweringPass,
) -> LoweringResult:
    """Lower a whole template document against a fresh compilation context.

    Args:
        root: The document root (normally a Block).
        config: Lowering configuration; defaults to ``LoweringConfig()``.
        node_pass: The node dispatcher class to run.

    Returns:
        A LoweringResult with the render tree, the hoisted top-level
        statements and every diagnostic in discovery order.
    """
    context = CompilationContext(config=config or LoweringConfig())
    logger.info("Lowering template document (%s)", root.type)
    lowering = node_pass(root, context, is_document_root=True)
    lowering.transform()
    result = LoweringResult(
        render=lowering.output or [],
        top_level_statements=list(context.top_level_statements),
        diagnostics=context.sink.diagnostics,
    )
    logger.info(
        "Lowered to %d render nodes, %d top-level statements, %d diagnostics (%d fatal)",
        len(result.render),
        len(result.top_level_statements),
        len(result.diagnostics),
        len(result.fatal_diagnostics),
    )
    return result


def lower_template_json(text: str, config: Optional[LoweringConfig] = None) -> LoweringResult:
    """Load a parser JSON document and lower it.

    Raises ``TemplateLoadError`` when *text* is not a valid node document.
    """
    return lower_document(load_template(text), config)


def dump_output(result: LoweringResult) -> str:
    """Return a human-readable dump of a lowering result.

    Args:
        result: The result of ``lower_document``.

    Returns:
        A multi-line string with one section each for top-level statements,
        the render tree and the diagnostics.
    """
    lines = ["═══ Top-level statements ═══"]
    lines.extend(f"  {stmt}" for stmt in result.top_level_statements)
    lines.append("═══ Render ═══")
    lines.extend(f"  {node}" for node in result.render)
    if result.diagnostics:
        lines.append("═══ Diagnostics ═══")
        lines.extend(f"  {diag}" for diag in result.diagnostics)
    return "\n".join(lines)


def output_kind_stats(result: LoweringResult) -> dict[str, int]:
    """Return output kind frequencies over render tree and hoisted statements."""
    return count_kinds(result.top_level_statements + result.render)
