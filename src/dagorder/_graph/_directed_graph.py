"""Mutable directed graph with Kahn's algorithm topological sort."""

import logging
from collections import deque
from typing import Self

from dagorder._element import Element, as_element
from dagorder._errors import CycleError, EdgeNotFoundError, NodeExistsError, NodeNotFoundError

from ._algorithms import by_slot, find_cycle

logger = logging.getLogger(__name__)


class DirectedGraph:
    """A directed graph of named elements that can be sorted topologically.

    An edge ``(a, b)`` means "a must come before b". Nodes are kept in
    insertion order and each node's outgoing edges are kept in the order they
    were added; both orders decide how ties are broken by the sort, so the
    result depends only on the sequence of calls that built the graph.

    Outgoing-edge tables are shared between a graph and its copies and are
    copied by whichever side first changes them.

    Attributes:
        capacity_hint: Expected number of nodes. Advisory only.

    Example:
        >>> graph = DirectedGraph()
        >>> graph.add_nodes("compile", "link", "test")
        >>> graph.add_edge("compile", "link")
        >>> graph.add_edge("link", "test")
        >>> graph.toposort()
        [TextElement('compile'), TextElement('link'), TextElement('test')]

    """

    __slots__ = ("_inputs", "_nodes", "_objects", "_outputs", "_shared", "capacity_hint")

    def __init__(self, capacity_hint: int = 0) -> None:
        if capacity_hint < 0:
            msg = f"capacity_hint must be non-negative, got {capacity_hint}"
            raise ValueError(msg)
        self.capacity_hint = capacity_hint
        self._nodes: list[str] = []
        self._objects: dict[str, Element] = {}
        # name -> {target: order slot}; dict order is slot order
        self._outputs: dict[str, dict[str, int]] = {}
        self._inputs: dict[str, int] = {}
        self._shared: set[str] = set()

    # --- mutation ---

    def add_node(self, element: object) -> None:
        """Add a node holding ``element``.

        The node name comes from the element's ``name``, the element itself if
        it is a ``str``, or its ``str()`` rendering, in that order.

        Raises:
            UnsupportedTypeError: If no name can be derived from the element.
            NodeExistsError: If a node with the same name already exists.

        """
        name, stored = as_element(element)
        if name in self._outputs:
            raise NodeExistsError(name)

        self._objects[name] = stored
        self._nodes.append(name)
        self._outputs[name] = {}
        self._inputs[name] = 0

    def add_nodes(self, *elements: object) -> None:
        """Add several nodes in order.

        Stops at the first failure; nodes added before it are kept.
        """
        for element in elements:
            self.add_node(element)

    def add_edge(self, from_: str, to: str) -> None:
        """Add an edge so that ``from_`` comes before ``to`` in the order.

        Adding an edge that already exists moves it to the last order slot of
        ``from_`` without counting it twice.

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph.

        """
        if from_ not in self._outputs:
            raise NodeNotFoundError(from_)
        if to not in self._outputs:
            raise NodeNotFoundError(to)

        edges = self._edges_for_update(from_)
        if edges.pop(to, None) is None:
            self._inputs[to] += 1
        edges[to] = next(reversed(edges.values()), 0) + 1

    def remove_edge(self, from_: str, to: str) -> None:
        """Remove the edge from ``from_`` to ``to``.

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph.
            EdgeNotFoundError: If there is no such edge.

        """
        if to not in self._outputs:
            raise NodeNotFoundError(to)
        if from_ not in self._outputs:
            raise NodeNotFoundError(from_)
        if to not in self._outputs[from_]:
            raise EdgeNotFoundError(from_, to)

        del self._edges_for_update(from_)[to]
        self._inputs[to] -= 1

    def _edges_for_update(self, name: str) -> dict[str, int]:
        edges = self._outputs[name]
        if name in self._shared:
            edges = dict(edges)
            self._outputs[name] = edges
            self._shared.discard(name)
        return edges

    # --- queries ---

    @property
    def nodes(self) -> tuple[str, ...]:
        """Node names in insertion order."""
        return tuple(self._nodes)

    def element(self, name: str) -> Element:
        """Return the element stored under ``name``."""
        try:
            return self._objects[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def successors(self, name: str) -> list[str]:
        """Return the targets of the edges leaving ``name``, in edge insertion order."""
        if name not in self._outputs:
            raise NodeNotFoundError(name)
        return by_slot(self._outputs[name])

    def indegree(self, name: str) -> int:
        """Return the number of edges pointing to ``name``."""
        try:
            return self._inputs[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def has_edge(self, from_: str, to: str) -> bool:
        """Check if the edge from ``from_`` to ``to`` exists."""
        if from_ not in self._outputs:
            raise NodeNotFoundError(from_)
        if to not in self._outputs:
            raise NodeNotFoundError(to)
        return to in self._outputs[from_]

    def edges(self) -> list[tuple[str, str]]:
        """Return all edges, grouped by source in node order."""
        return [(name, to) for name in self._nodes for to in by_slot(self._outputs[name])]

    def find_cycle(self) -> list[str] | None:
        """Return one cycle of the graph, or None if it is acyclic.

        The graph is not modified.
        """
        return find_cycle({name: by_slot(self._outputs[name]) for name in self._nodes})

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        """Check if a node name is in the graph."""
        return name in self._outputs

    def __repr__(self) -> str:
        n_edges = sum(len(edges) for edges in self._outputs.values())
        return f"{type(self).__name__}(nodes={len(self._nodes)}, edges={n_edges})"

    # --- copying and sorting ---

    def copy(self) -> Self:
        """Return an independent copy of the graph.

        Elements are shared, not copied. Outgoing-edge tables are shared
        until either graph changes one of them.
        """
        clone = type(self).__new__(type(self))
        clone.capacity_hint = self.capacity_hint
        clone._nodes = list(self._nodes)
        clone._objects = dict(self._objects)
        clone._outputs = dict(self._outputs)
        clone._inputs = dict(self._inputs)
        clone._shared = set(self._outputs)
        self._shared = set(self._outputs)
        return clone

    __copy__ = copy

    def toposort(self) -> list[Element]:
        """Return the elements in topological order without changing the graph.

        Sorts a copy of the graph; see :meth:`destructive_toposort`.

        Raises:
            CycleError: If the graph contains a cycle.

        """
        return self.copy().destructive_toposort()

    def destructive_toposort(self) -> list[Element]:
        """Return the elements in topological order, consuming the edges.

        Uses Kahn's algorithm: nodes with no incoming edges are queued in
        insertion order, and each dequeued node's outgoing edges are removed in
        edge insertion order, queueing targets whose last incoming edge went
        away. After a successful sort the graph has no edges left.

        Returns:
            Stored elements, each after every element it depends on.

        Raises:
            CycleError: If the graph contains a cycle. The graph is left with
                the edges the sort could not remove.
            NodeNotFoundError: If a sorted name has no stored element.

        """
        order: list[str] = []
        ready = deque(name for name in self._nodes if self._inputs[name] == 0)

        while ready:
            name = ready.popleft()
            order.append(name)

            # All of the node's edges go away, so the table is replaced rather than copied.
            edges = self._outputs[name]
            self._outputs[name] = {}
            self._shared.discard(name)

            for to in by_slot(edges):
                self._inputs[to] -= 1
                if self._inputs[to] == 0:
                    ready.append(to)

        if sum(self._inputs.values()) > 0:
            unresolved = [name for name in self._nodes if self._inputs[name] > 0]
            cycle = find_cycle({name: by_slot(self._outputs[name]) for name in unresolved}) or []
            logger.debug("Cycle detected, %d of %d nodes unresolved", len(unresolved), len(self._nodes))
            raise CycleError(unresolved, cycle)

        logger.debug("Sorted %d nodes", len(order))

        elements: list[Element] = []
        for name in order:
            try:
                elements.append(self._objects[name])
            except KeyError:
                raise NodeNotFoundError(name) from None
        return elements
