"""Port protocols for layercake - the host rendering engine seam."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeAlias

from layercake.kernel.props import Props

Node: TypeAlias = Any
"""Opaque render output. Only the host looks inside it."""

Component: TypeAlias = Callable[[Props], Node]


class HostPort(Protocol):
    """Rendering host port.

    The combinators consume exactly these two primitives.
    """

    def invoke(self, component: Component, props: Props) -> Node:
        """Instantiate a component with the given props."""
        ...

    def group(self, entries: Sequence[tuple[str, Node]]) -> Node:
        """Combine ordered, keyed nodes into one node with no wrapper."""
        ...
