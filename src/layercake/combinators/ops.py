"""Combinator primitives: Id, Nil, comp, with_props, bypass, forward, before, after, concat."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import reduce

from layercake.host.direct import DirectHost
from layercake.host.tracing import TracingHost, component_name
from layercake.kernel.ports import Component, HostPort, Node
from layercake.kernel.props import CHILDREN, Props, merge, split_children, with_children
from layercake.kernel.trace import Trace


def Nil(props: Props) -> None:
    """Empty component: renders nothing and never touches its continuation."""
    return None


def _named(component: Component, describe: Callable[[], str]) -> Component:
    component.__layercake_name__ = describe
    return component


@dataclass(frozen=True)
class Algebra:
    """Component combinators bound to a rendering host.

    Every combinator takes Components and returns a Component. The host is
    only ever reached through invoke() and group().

    Attributes:
        host: The rendering host supplying invoke and group.
        Id: Identity for comp2. Invokes its continuation with the rest of its props.
        Nil: Identity for concat2. Renders nothing.
    """

    host: HostPort = field(default_factory=DirectHost)
    Id: Component = field(init=False, repr=False, compare=False)
    Nil: Component = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        host = self.host

        def Id(props: Props) -> Node:
            continuation, rest = split_children(props)
            return host.invoke(continuation, rest)

        object.__setattr__(self, "Id", Id)
        object.__setattr__(self, "Nil", Nil)

    def traced(self, trace: Trace) -> Algebra:
        """Create an algebra whose host records every invocation into trace."""
        return Algebra(host=TracingHost(inner=self.host, trace=trace))

    def comp2(self, x: Component, y: Component) -> Component:
        """Nest y inside x.

        Semantics:
            - x renders with the incoming props minus children
            - x's continuation renders y with whatever props x passes it
            - y's continuation is the original incoming continuation

        x decides how many times its continuation runs, and with what.
        """
        host = self.host

        def composed(props: Props) -> Node:
            continuation, rest = split_children(props)

            def next_layer(passed: Props) -> Node:
                return host.invoke(y, with_children(passed, continuation))

            return host.invoke(x, with_children(rest, next_layer))

        return _named(composed, lambda: f"comp2({component_name(x)}, {component_name(y)})")

    def comp(self, *components: Component) -> Component:
        """Left-fold comp2 from Id: comp(a, b, c) renders a > b > c > continuation.

        comp() with no arguments is Id.
        """
        return reduce(self.comp2, components, self.Id)

    def with_props(self, extra: Props) -> Component:
        """Pass the continuation the incoming props overridden by extra.

        Renders nothing of its own. Keys in extra win on conflict.
        """
        host = self.host
        extra = dict(extra)

        def inject(props: Props) -> Node:
            continuation, rest = split_children(props)
            return host.invoke(continuation, merge(rest, extra))

        return _named(inject, lambda: f"with_props({sorted(extra)})")

    def bypass(self, x: Component) -> Component:
        """Render x isolated from the incoming props.

        x receives {} plus a continuation. Whatever x passes onward is merged
        with the incoming props, incoming keys winning, before the original
        continuation sees it.
        """
        host = self.host

        def isolated(props: Props) -> Node:
            continuation, rest = split_children(props)
            restore = self.comp(self.with_props(rest), continuation)
            return host.invoke(x, {CHILDREN: restore})

        return _named(isolated, lambda: f"bypass({component_name(x)})")

    def forward(self, x: Component) -> Component:
        """Like bypass, but x also sees the incoming props directly."""
        host = self.host

        def forwarded(props: Props) -> Node:
            continuation, rest = split_children(props)
            restore = self.comp(self.with_props(rest), continuation)
            return host.invoke(x, with_children(rest, restore))

        return _named(forwarded, lambda: f"forward({component_name(x)})")

    def after(self, x: Component) -> Component:
        """Render x's own output, then the continuation, as keyed siblings.

        x is terminated with Nil. The continuation is rendered with no props.
        """
        host = self.host

        def spliced(props: Props) -> Node:
            continuation, rest = split_children(props)
            return host.group(
                [
                    ("l", host.invoke(x, with_children(rest, self.Nil))),
                    ("r", host.invoke(continuation, {})),
                ]
            )

        return _named(spliced, lambda: f"after({component_name(x)})")

    def before(self, x: Component) -> Component:
        """Render the continuation, then x's own output, as keyed siblings."""
        host = self.host

        def spliced(props: Props) -> Node:
            continuation, rest = split_children(props)
            return host.group(
                [
                    ("l", host.invoke(continuation, {})),
                    ("r", host.invoke(x, with_children(rest, self.Nil))),
                ]
            )

        return _named(spliced, lambda: f"before({component_name(x)})")

    def concat2(self, x: Component, y: Component) -> Component:
        """Render x then y as siblings, both with the incoming props."""
        return self.comp2(self.forward(self.after(x)), y)

    def concat(self, *components: Component) -> Component:
        """Render every component as one flat ordered group of siblings.

        Renders the same siblings as folding concat2 from Nil, but in a single
        group keyed by position. Each component receives the incoming props.
        All but the last are terminated with Nil; the last gets the incoming
        continuation. concat() with no arguments is Nil.
        """
        if not components:
            return self.Nil
        host = self.host
        last = len(components) - 1

        def flattened(props: Props) -> Node:
            continuation, rest = split_children(props)
            entries = []
            for i, x in enumerate(components):
                tail = continuation if i == last else self.Nil
                entries.append((str(i), host.invoke(x, with_children(rest, tail))))
            return host.group(entries)

        return _named(flattened, lambda: f"concat({', '.join(component_name(x) for x in components)})")


default_algebra = Algebra()

Id = default_algebra.Id
comp2 = default_algebra.comp2
comp = default_algebra.comp
with_props = default_algebra.with_props
withProps = with_props
bypass = default_algebra.bypass
forward = default_algebra.forward
before = default_algebra.before
after = default_algebra.after
concat2 = default_algebra.concat2
concat = default_algebra.concat
