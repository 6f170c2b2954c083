"""Error types raised by graph operations."""

from enum import StrEnum
from typing import Self


class ErrorKind(StrEnum):
    """Kinds of graph failures.

    Each member carries a short description as its docstring.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a new member with a docstring."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    UNSUPPORTED_TYPE = "unsupported_type", "The element has no name, is not text and cannot render itself as text."
    NODE_EXISTS = "node_exists", "A node with the same name is already in the graph."
    NODE_NOT_FOUND = "node_not_found", "A referenced node is not in the graph."
    EDGE_NOT_FOUND = "edge_not_found", "A referenced edge is not in the graph."
    CYCLE = "cycle", "The graph contains a cycle, so no topological order exists."


class GraphError(Exception):
    """Base class for all graph errors."""

    kind: ErrorKind


class UnsupportedTypeError(GraphError, TypeError):
    """Raised when an element cannot be given a node name."""

    kind = ErrorKind.UNSUPPORTED_TYPE

    def __init__(self, element: object) -> None:
        self.element = element
        super().__init__(f"dagorder: unsupported type {type(element).__name__!r}")


class NodeExistsError(GraphError):
    """Raised when adding a node whose name is already taken."""

    kind = ErrorKind.NODE_EXISTS

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"dagorder: node {name!r} already exists")


class NodeNotFoundError(GraphError, LookupError):
    """Raised when a node name does not resolve to a node."""

    kind = ErrorKind.NODE_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"dagorder: node {name!r} not found")


class EdgeNotFoundError(GraphError, LookupError):
    """Raised when removing an edge that does not exist."""

    kind = ErrorKind.EDGE_NOT_FOUND

    def __init__(self, from_: str, to: str) -> None:
        self.from_ = from_
        self.to = to
        super().__init__(f"dagorder: edge {from_!r} -> {to!r} not found")


class CycleError(GraphError):
    """Raised when a topological order does not exist.

    Attributes:
        unresolved: Names of the nodes the sort could not place, in insertion order.
        cycle: One cycle among them, closed on its first name (``[a, b, a]``).

    """

    kind = ErrorKind.CYCLE

    def __init__(self, unresolved: list[str], cycle: list[str]) -> None:
        self.unresolved = unresolved
        self.cycle = cycle
        super().__init__(f"dagorder: graph contains a cycle: {' -> '.join(cycle)}")
