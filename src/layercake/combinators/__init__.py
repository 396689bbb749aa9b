"""Combinators - render component composition primitives."""

from .laws import renders_alike, snapshot
from .ops import (
    Algebra,
    Id,
    Nil,
    after,
    before,
    bypass,
    comp,
    comp2,
    concat,
    concat2,
    default_algebra,
    forward,
    with_props,
    withProps,
)

__all__ = [
    "Algebra",
    "default_algebra",
    # Identity elements
    "Id",
    "Nil",
    # Nesting
    "comp2",
    "comp",
    # Props
    "with_props",
    "withProps",
    "bypass",
    "forward",
    # Siblings
    "before",
    "after",
    "concat2",
    "concat",
    # Laws
    "snapshot",
    "renders_alike",
]
