"""layercake - composable render component combinators.

Build parent > child > grandchild component chains, reshape props between
layers, splice siblings around a layer and flatten components into sequences
without writing nested wrapper components by hand.

Example:
    from layercake import comp, concat, with_props
    from layercake.host import h

    def title(props):
        return h("h1", None, props["title"])

    page = comp(with_props({"title": "Hello"}), concat(title, title))
"""

from .combinators import (
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
    renders_alike,
    snapshot,
    with_props,
    withProps,
)
from .kernel import (
    CHILDREN,
    Component,
    Evidence,
    HostPort,
    InvocationError,
    LayercakeError,
    Node,
    Props,
    Trace,
    TraceOptions,
    merge,
    split_children,
    with_children,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Component",
    "Node",
    "Props",
    "CHILDREN",
    "HostPort",
    # Combinators
    "Algebra",
    "default_algebra",
    "Id",
    "Nil",
    "comp2",
    "comp",
    "with_props",
    "withProps",
    "bypass",
    "forward",
    "before",
    "after",
    "concat2",
    "concat",
    # Props helpers
    "merge",
    "split_children",
    "with_children",
    # Errors
    "LayercakeError",
    "InvocationError",
    # Tracing
    "Trace",
    "TraceOptions",
    "Evidence",
    # Laws
    "snapshot",
    "renders_alike",
]
