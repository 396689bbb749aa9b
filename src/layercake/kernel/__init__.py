"""Kernel layer - pure abstractions for layercake."""

from layercake.kernel.errors import InvocationError, LayercakeError
from layercake.kernel.ports import Component, HostPort, Node
from layercake.kernel.props import CHILDREN, Props, merge, split_children, with_children
from layercake.kernel.trace import Evidence, Trace, TraceOptions

__all__ = [
    # Props
    "Props",
    "CHILDREN",
    "merge",
    "split_children",
    "with_children",
    # Ports
    "Component",
    "Node",
    "HostPort",
    # Errors
    "LayercakeError",
    "InvocationError",
    # Tracing
    "Evidence",
    "Trace",
    "TraceOptions",
]
