"""Script parsing layer — splits embedded script text into top-level statements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from . import constants


class ParserFactory(ABC):
    """Abstract factory for obtaining a tree-sitter language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def __init__(self):
        self._parsers: dict[str, object] = {}

    def get_parser(self, language: str):
        if language not in self._parsers:
            import tree_sitter_language_pack as tslp

            self._parsers[language] = tslp.get_parser(language)
        return self._parsers[language]


@dataclass(frozen=True)
class ScriptStatement:
    """Source text of one top-level statement, with its 0-based start point.

    ``column`` counts characters, not bytes.
    """

    text: str
    node_type: str
    row: int
    column: int


@dataclass
class ParsedScript:
    statements: list[ScriptStatement] = field(default_factory=list)
    error_point: tuple[int, int] | None = None

    @property
    def has_error(self) -> bool:
        return self.error_point is not None


def _first_error_node(node):
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None


def _char_point(encoded: bytes, node) -> tuple[int, int]:
    """Row and character column of *node* (tree-sitter columns are bytes)."""
    line_start = encoded.rfind(b"\n", 0, node.start_byte) + 1
    column = len(encoded[line_start : node.start_byte].decode("utf-8", errors="replace"))
    return node.start_point[0], column


class ScriptParser:
    """Parses script text with tree-sitter and lists its top-level statements."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: str, language: str) -> ParsedScript:
        encoded = source.encode("utf-8")
        tree = self._factory.get_parser(language).parse(encoded)
        root = tree.root_node
        if root.has_error:
            error_node = _first_error_node(root)
            point = _char_point(encoded, error_node) if error_node is not None else (0, 0)
            return ParsedScript(error_point=point)
        statements = [
            ScriptStatement(
                text=encoded[child.start_byte : child.end_byte].decode("utf-8"),
                node_type=child.type,
                row=child.start_point[0],
                column=_char_point(encoded, child)[1],
            )
            for child in root.children
            if child.is_named and child.type not in constants.SCRIPT_COMMENT_TYPES
        ]
        return ParsedScript(statements=statements)
