"""Combinator laws and helpers for checking them."""

# Combinators satisfy the following algebraic laws, where "==" means the
# two components render equal snapshots for every props map:
#
# 1. Nesting identity: comp(Id, x) == x == comp(x, Id)
#    Id delegates straight to its continuation
#
# 2. Nesting associativity: comp(comp(a, b), c) == comp(a, comp(b, c))
#    Nesting order is observationally flat
#
# 3. Flattening identity: concat(Nil, x) == x == concat(x, Nil)
#    Nil contributes no siblings
#
# 4. Flattening associativity: concat(concat(a, b), c) == concat(a, concat(b, c))
#    Groups splice into their parent group
#
# 5. Props precedence: comp(with_props(extra), x) renders x with
#    {**incoming, **extra}; bypass and forward restore the incoming props
#    over whatever their inner component passes on

from __future__ import annotations

from typing import Any

from layercake.host.direct import DirectHost
from layercake.host.snapshot import to_json
from layercake.kernel.ports import Component, HostPort
from layercake.kernel.props import Props


def snapshot(component: Component, props: Props | None = None, host: HostPort | None = None) -> Any:
    """Invoke a component and return the normalised render result."""
    host = host or DirectHost()
    return to_json(host.invoke(component, props or {}))


def renders_alike(
    left: Component,
    right: Component,
    props: Props | None = None,
    host: HostPort | None = None,
) -> bool:
    """Check that two components render equal snapshots for the given props."""
    return snapshot(left, props, host) == snapshot(right, props, host)
