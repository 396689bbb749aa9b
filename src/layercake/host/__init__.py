"""Reference host for layercake.

A minimal in-process rendering host: plain-data nodes, a direct host,
a tracing host and snapshot normalisation.
"""

from .direct import DirectHost
from .nodes import Element, Entry, Fragment, RenderNode, h
from .snapshot import to_json
from .tracing import TracingHost, component_name

__all__ = [
    "DirectHost",
    "TracingHost",
    "component_name",
    "Element",
    "Entry",
    "Fragment",
    "RenderNode",
    "h",
    "to_json",
]
