"""Snapshot normalisation for render results.

Mirrors what a test renderer reports: fragments disappear into their parent,
empty renders vanish, and elements become plain dicts. Two render results
with equal snapshots are observationally the same to a user.
"""

from __future__ import annotations

from typing import Any

from .nodes import Element, Fragment, RenderNode


def to_json(node: RenderNode) -> Any:
    """Normalise a render result.

    Returns:
        None for an empty render, the single item when exactly one remains,
        otherwise the list of top-level items.
    """
    items = _flatten(node)
    if not items:
        return None
    if len(items) == 1:
        return items[0]
    return items


def _flatten(node: RenderNode) -> list[Any]:
    if node is None:
        return []
    if isinstance(node, Fragment):
        return [item for entry in node.entries for item in _flatten(entry.node)]
    if isinstance(node, Element):
        children = [item for child in node.children for item in _flatten(child)]
        return [
            {
                "type": node.type,
                "props": dict(node.props),
                "children": children or None,
            }
        ]
    return [node]
