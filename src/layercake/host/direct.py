"""Direct host - invocation is plain function application."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from layercake.kernel.errors import InvocationError
from layercake.kernel.ports import Component, Node
from layercake.kernel.props import Props

from .nodes import Entry, Fragment


@dataclass(frozen=True)
class DirectHost:
    """Reference host with no scheduling, diffing or lifecycle.

    Each component receives a fresh dict copy of its props, so nothing a
    component does to its argument can leak into a caller's map.
    """

    def invoke(self, component: Component, props: Props) -> Node:
        if not callable(component):
            raise InvocationError(
                f"Cannot invoke {type(component).__name__!s} as a component",
                target=component,
            )
        return component(dict(props))

    def group(self, entries: Sequence[tuple[str, Node]]) -> Fragment:
        """Wrap keyed nodes in a Fragment, preserving order.

        Raises:
            ValueError: If two entries share a key
        """
        keys = [key for key, _ in entries]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate group keys: {keys}")
        return Fragment(entries=[Entry(key=key, node=node) for key, node in entries])
