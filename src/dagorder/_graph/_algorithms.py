"""Graph algorithms used by the directed graph."""

from collections.abc import Hashable, Mapping, Sequence
from typing import TypeVar

_ON_PATH = 1
_DONE = 2

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def by_slot(edges: Mapping[T, int]) -> list[T]:
    """Return edge targets in ascending order slot (edge insertion order)."""
    return sorted(edges, key=edges.__getitem__)


def find_cycle(successors: Mapping[H, Sequence[H]]) -> list[H] | None:
    """Find one cycle in a graph given as a successor mapping.

    The search is a depth-first walk started from each key in mapping order,
    following successors in sequence order, so the cycle found is the same
    for the same input. Successors missing from the mapping are treated as
    having no successors themselves.

    Args:
        successors: Mapping from node to the nodes its edges point to.

    Returns:
        The cycle as a list closed on its first node (``[a, b, a]``),
        or None if the graph is acyclic.

    Example:
        >>> find_cycle({"a": ["b"], "b": ["c"], "c": ["b"]})
        ['b', 'c', 'b']
        >>> find_cycle({"a": ["b"], "b": []}) is None
        True

    """
    state: dict[H, int] = {}

    for root in successors:
        if root in state:
            continue
        state[root] = _ON_PATH
        path = [root]
        stack = [iter(successors.get(root, ()))]
        while stack:
            for nxt in stack[-1]:
                seen = state.get(nxt)
                if seen == _ON_PATH:
                    return [*path[path.index(nxt) :], nxt]
                if seen is None:
                    state[nxt] = _ON_PATH
                    path.append(nxt)
                    stack.append(iter(successors.get(nxt, ())))
                    break
            else:
                state[path.pop()] = _DONE
                stack.pop()

    return None
