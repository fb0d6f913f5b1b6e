"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

DISALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "html",
        "body",
        "link",
        "meta",
        "style",
    }
)

SCRIPT_TAG = "script"
SCRIPT_SRC_ATTR = "src"
SCRIPT_TYPE_ATTR = "type"

SCRIPT_TYPE_TYPESCRIPT = "text/typescript"
SCRIPT_TYPE_MOLOSSER = "text/molosser"

SCRIPT_LANGUAGE = "typescript"

CLASS_ATTR = "class"

ATTRIBUTE_RENAMES: tuple[tuple[str, str], ...] = (
    ("class", "className"),
    ("for", "htmlFor"),
)

DEFAULT_CASE_EXPR = "default"

TRUE_LITERAL = "true"
NULL_LITERAL = "null"

SCRIPT_COMMENT_TYPES: frozenset[str] = frozenset({"comment"})
