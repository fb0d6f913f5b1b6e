"""ScriptTransformer — literal script content to hoisted module statements."""

from __future__ import annotations

import logging

from ._base import Transformer
from ..diagnostics import ErrorCode
from ..jsx import OutputKind, OutputNode
from ..parser import ScriptStatement
from ..template import SourcePosition, TagNode, TextNode, extract_pos_info

logger = logging.getLogger(__name__)


class ScriptTransformer(Transformer[TagNode, list[OutputNode]]):
    """Parses the text of a script element into one STATEMENT per top-level statement.

    Only the literal text children are read; anything else inside the
    element is skipped here (the node pass reports it).
    """

    def transform(self) -> None:
        node = self.input
        children = node.block.nodes if node.block is not None else []
        texts = [n for n in children if isinstance(n, TextNode)]
        source = "".join(t.val for t in texts)
        if not source.strip():
            self.output = []
            return

        origins = _row_origins(texts, extract_pos_info(node))

        language = self.context.config.script_language
        parsed = self.context.script_parser.parse(source, language)
        if parsed.has_error:
            row, column = parsed.error_point
            self.push_error(
                f"script content is not valid {language}",
                code=ErrorCode.ScriptSyntaxError,
                position=_offset(origins, row, column),
            )
            return

        logger.debug("Parsed %d top-level script statements", len(parsed.statements))
        self.output = [_to_statement(s, origins) for s in parsed.statements]


def _row_origins(texts: list[TextNode], tag_position: SourcePosition) -> dict[int, SourcePosition]:
    """Map each script row to the position of the text node that starts it.

    The parser strips the template indentation from every text line, so a
    line's column offset comes from its own text node.
    """
    origins: dict[int, SourcePosition] = {}
    row = 0
    at_row_start = True
    for text in texts:
        position = extract_pos_info(text)
        if at_row_start and text.val[:1] not in ("", "\n") and not position.is_unknown():
            origins.setdefault(row, position)
        if text.val:
            row += text.val.count("\n")
            at_row_start = text.val.endswith("\n")
    origins.setdefault(
        0,
        SourcePosition(line=tag_position.line + 1, column=1, filename=tag_position.filename),
    )
    return origins


def _offset(origins: dict[int, SourcePosition], row: int, column: int) -> SourcePosition:
    if row in origins:
        origin = origins[row]
        return SourcePosition(
            line=origin.line, column=origin.column + column, filename=origin.filename
        )
    # Row started mid text node: count lines from the closest known row
    known = max(r for r in origins if r < row)
    origin = origins[known]
    return SourcePosition(
        line=origin.line + row - known, column=column + 1, filename=origin.filename
    )


def _to_statement(
    statement: ScriptStatement, origins: dict[int, SourcePosition]
) -> OutputNode:
    return OutputNode(
        kind=OutputKind.STATEMENT,
        value=statement.text,
        source_location=_offset(origins, statement.row, statement.column),
    )
