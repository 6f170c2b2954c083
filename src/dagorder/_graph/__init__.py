"""Graph module providing the directed graph and its algorithms.

This module contains:
- DirectedGraph: A mutable directed graph of named elements
- find_cycle: Algorithm locating one cycle in a successor mapping
"""

from ._algorithms import find_cycle
from ._directed_graph import DirectedGraph

__all__ = ["DirectedGraph", "find_cycle"]
