"""Tracing host - records the instantiation chain of a render pass."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from layercake.kernel.ports import Component, HostPort, Node
from layercake.kernel.props import CHILDREN, Props
from layercake.kernel.trace import Trace

logger = logging.getLogger(__name__)


def component_name(component: Any) -> str:
    """Best-effort display name for a component.

    Combinator results carry a ``__layercake_name__`` callable so their
    names are only built when something asks for them.
    """
    describe = getattr(component, "__layercake_name__", None)
    if callable(describe):
        return describe()
    name = getattr(component, "__name__", None)
    if isinstance(name, str):
        return name
    return type(component).__name__


@dataclass(frozen=True)
class TracingHost:
    """Host decorator that records every invoke and group into a Trace.

    Each invocation is recorded before it runs and pushed as the parent of
    whatever it invokes in turn, so Trace.as_tree() mirrors the render tree.
    Failures are recorded as "invoke_error" and re-raised unchanged.
    """

    inner: HostPort
    trace: Trace

    def invoke(self, component: Component, props: Props) -> Node:
        trace = self.trace
        name = component_name(component)
        keys = sorted(k for k in props if k != CHILDREN)

        info: dict[str, Any] = {
            "component": name,
            "props": keys,
            "has_children": props.get(CHILDREN) is not None,
        }
        if trace.options.record_props:
            info["values"] = {k: props[k] for k in keys}

        event_id = trace.record("invoke", info=info)
        if event_id is not None:
            trace.push(event_id)
        logger.debug("invoke %s props=%s", name, keys)

        start_time = time.perf_counter()
        try:
            node = self.inner.invoke(component, props)
        except Exception as exc:
            trace.record(
                "invoke_error",
                info={"component": name, "error": repr(exc)},
                parent_id=event_id,
            )
            logger.debug("invoke %s failed: %r", name, exc)
            raise
        finally:
            if event_id is not None:
                trace.pop()
        duration_ms = (time.perf_counter() - start_time) * 1000

        if event_id is not None:
            trace.finish(event_id, duration_ms)
        return node

    def group(self, entries: Sequence[tuple[str, Node]]) -> Node:
        keys = [key for key, _ in entries]
        self.trace.record("group", info={"keys": keys})
        logger.debug("group keys=%s", keys)
        return self.inner.group(entries)
