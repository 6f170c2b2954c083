"""Service Startup Example for dagorder.

Services are plain strings here. A dependency loop between two of them is
reported with the cycle that causes it.
"""

import dagorder as do

graph = do.DirectedGraph()
graph.add_nodes("database", "cache", "auth", "api", "web")

# (dependency, dependent)
for before, after in [
    ("database", "auth"),
    ("cache", "api"),
    ("auth", "api"),
    ("api", "web"),
    ("web", "auth"),
]:
    graph.add_edge(before, after)


if __name__ == "__main__":
    try:
        print(graph.toposort())
    except do.CycleError as e:
        print(f"Cannot start: {' -> '.join(e.cycle)}")
        graph.remove_edge("web", "auth")
        print(graph.toposort())
