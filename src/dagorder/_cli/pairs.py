"""Reading ``tsort``-style input into a graph.

This module is the functional core of the CLI - no I/O, no Rich rendering.

Input is a whitespace separated sequence of name pairs. A pair ``a b``
means ``a`` comes before ``b``; a pair ``a a`` only declares ``a``.
"""

import logging

from dagorder._graph import DirectedGraph

logger = logging.getLogger(__name__)


class PairsError(ValueError):
    """Raised when the input does not consist of whole pairs."""

    def __init__(self, dangling: str) -> None:
        self.dangling = dangling
        super().__init__(f"input contains an odd number of tokens (last token: {dangling!r})")


def parse_pairs(text: str) -> list[tuple[str, str]]:
    """Split input text into (before, after) name pairs.

    Args:
        text: Whitespace separated tokens.

    Returns:
        List of pairs in input order.

    Raises:
        PairsError: If the number of tokens is odd.

    Example:
        >>> parse_pairs("a b\\nb c")
        [('a', 'b'), ('b', 'c')]

    """
    tokens = text.split()
    if len(tokens) % 2:
        raise PairsError(tokens[-1])
    return list(zip(tokens[::2], tokens[1::2], strict=True))


def build_graph(pairs: list[tuple[str, str]], capacity: int = 0) -> DirectedGraph:
    """Build a graph from name pairs.

    Nodes are added in order of first appearance and edges in input order,
    so the sort breaks ties the same way for the same input.
    """
    graph = DirectedGraph(capacity)
    for pair in pairs:
        for name in pair:
            if name not in graph:
                graph.add_node(name)
    for before, after in pairs:
        if before != after:
            graph.add_edge(before, after)
    logger.debug(f"Built graph from {len(pairs)} pairs: {graph!r}")
    return graph
