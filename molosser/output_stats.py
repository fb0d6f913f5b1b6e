"""Pure functions for computing statistics over output node lists."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from .jsx import OutputNode


def _walk(nodes: list[OutputNode]) -> Iterator[OutputNode]:
    for node in nodes:
        yield node
        yield from _walk(node.children)


def count_kinds(nodes: list[OutputNode]) -> dict[str, int]:
    """Return a frequency map of output kinds over *nodes* and all their descendants.

    Args:
        nodes: A list of output nodes.

    Returns:
        A dict mapping kind name strings to their occurrence counts.
        Empty dict for an empty input list.
    """
    return dict(Counter(node.kind.value for node in _walk(nodes)))
