"""Render trace infrastructure - separate from the render tree itself.

A Trace captures the instantiation chain of a single render pass: which
component invoked which, with what prop keys, and how long it took.
Trace is host infrastructure; the combinators never touch it.
Tree relationships are reconstructed only on demand via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class TraceOptions:
    """Configuration for render tracing.

    Attributes:
        enabled: Record events at all.
        record_props: Store prop values in evidence info, not just the keys.
    """

    enabled: bool = True
    record_props: bool = False


@dataclass(frozen=True)
class Evidence:
    """A single event captured during a render pass."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Trace context for one render pass.

    Uses stack-based nesting via push/pop so each invocation is recorded as a
    child of the invocation that triggered it. Not safe to share between
    concurrent render passes.
    """

    def __init__(self, options: TraceOptions | None = None) -> None:
        self.options = options or TraceOptions()
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._stack: list[int] = []

    @property
    def enabled(self) -> bool:
        return self.options.enabled

    def push(self, event_id: int) -> None:
        """Make event_id the parent of subsequently recorded events."""
        self._stack.append(event_id)

    def pop(self) -> int | None:
        """Pop the current parent, or return None if the stack is empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "invoke", "group", "invoke_error")
            info: Additional context
            parent_id: Explicit parent event ID; defaults to the top of the stack
            duration_ms: Execution duration

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        if parent_id is not None:
            effective_parent = parent_id
        elif self._stack:
            effective_parent = self._stack[-1]
        else:
            effective_parent = None

        event_id = self._next_id
        self._next_id += 1

        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=effective_parent,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def finish(self, event_id: int, duration_ms: float) -> None:
        """Attach a duration to an already recorded event.

        Event ids are list positions until clear() resets both.
        """
        if not 0 <= event_id < len(self._events):
            raise KeyError(f"Event {event_id} not found in trace")
        self._events[event_id] = replace(self._events[event_id], duration_ms=duration_ms)

    def get_events(self) -> list[Evidence]:
        """Get all recorded events in recording order."""
        return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Find events whose attributes or info entries match all criteria.

        Example:
            trace.find_all(action="invoke", component="Header")
        """
        return [
            e
            for e in self._events
            if all(getattr(e, k, None) == v or e.info.get(k) == v for k, v in kwargs.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse across render passes)."""
        self._events.clear()
        self._next_id = 0
        self._stack.clear()
