"""Render tree nodes produced by the reference host - pure data definitions."""

from __future__ import annotations

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

RenderNode: TypeAlias = Any
"""Element, Fragment, text (str) or None for the empty render.

Left open so components may return any leaf value the caller understands.
"""


class Element(BaseModel):
    """A typed node with props and ordered children."""
    model_config = ConfigDict(frozen=True)

    type: str
    props: dict[str, Any] = Field(default_factory=dict)
    children: list[RenderNode] = Field(default_factory=list)


class Entry(BaseModel):
    """One keyed position inside a Fragment."""
    model_config = ConfigDict(frozen=True)

    key: str
    node: RenderNode = None


class Fragment(BaseModel):
    """Ordered keyed siblings with no wrapping element of their own."""
    model_config = ConfigDict(frozen=True)

    entries: list[Entry] = Field(default_factory=list)

    @property
    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    @property
    def nodes(self) -> list[RenderNode]:
        return [entry.node for entry in self.entries]


def h(type: str, props: dict[str, Any] | None = None, *children: RenderNode) -> Element:
    """Build an Element, React createElement style.

    Example:
        h("div", None, h("h1", None, "Title"), "body text")
    """
    return Element(type=type, props=dict(props or {}), children=list(children))
