"""Property maps and the reserved continuation key."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from layercake.kernel.ports import Component

Props: TypeAlias = Mapping[str, Any]

CHILDREN = "children"


def split_children(props: Props) -> tuple[Component | None, dict[str, Any]]:
    """Separate the continuation from the rest of a property map.

    Returns:
        (continuation, rest) where rest is a new dict without ``children``.
        The continuation is None when the key is absent.
    """
    rest = {k: v for k, v in props.items() if k != CHILDREN}
    return props.get(CHILDREN), rest


def with_children(props: Props, continuation: Component | None) -> dict[str, Any]:
    """Copy props, replacing any ``children`` with the given continuation.

    A None continuation leaves the key out entirely.
    """
    _, new_props = split_children(props)
    if continuation is not None:
        new_props[CHILDREN] = continuation
    return new_props


def merge(base: Props, override: Props) -> dict[str, Any]:
    """Merge two property maps into a new dict, ``override`` winning on conflict."""
    return {**base, **override}
