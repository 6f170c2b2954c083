"""Topological ordering of named elements in a directed graph."""

__all__ = [
    "CycleError",
    "DirectedGraph",
    "EdgeNotFoundError",
    "Element",
    "ErrorKind",
    "GraphError",
    "NodeExistsError",
    "NodeNotFoundError",
    "TextElement",
    "UnsupportedTypeError",
    "as_element",
    "find_cycle",
    "names",
]

from ._element import Element, TextElement, as_element, names
from ._errors import (
    CycleError,
    EdgeNotFoundError,
    ErrorKind,
    GraphError,
    NodeExistsError,
    NodeNotFoundError,
    UnsupportedTypeError,
)
from ._graph import DirectedGraph, find_cycle
