"""Lowering pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .diagnostics import Diagnostic
from .jsx import OutputNode
from . import constants


@dataclass(frozen=True)
class LoweringConfig:
    """Groups the tunable knobs of a single compile."""

    disallowed_tags: frozenset[str] = constants.DISALLOWED_TAGS
    script_tag: str = constants.SCRIPT_TAG
    primary_script_type: str = constants.SCRIPT_TYPE_TYPESCRIPT
    template_script_type: str = constants.SCRIPT_TYPE_MOLOSSER
    attribute_renames: tuple[tuple[str, str], ...] = constants.ATTRIBUTE_RENAMES
    script_language: str = constants.SCRIPT_LANGUAGE


@dataclass
class LoweringResult:
    """Everything a compile produced: render tree, hoisted code, diagnostics."""

    render: list[OutputNode] = field(default_factory=list)
    top_level_statements: list[OutputNode] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def fatal_diagnostics(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_fatal]

    @property
    def has_fatal(self) -> bool:
        return any(d.is_fatal for d in self.diagnostics)
