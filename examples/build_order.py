"""Build Order Example for dagorder.

This example orders the steps of a small C build:
- Named elements (a dataclass with a ``name`` field) stored in graph nodes
- Edges meaning "must run before"
- Non-destructive sorting, so the graph can be extended and sorted again
"""

from dataclasses import dataclass

import dagorder as do


@dataclass(frozen=True)
class Step:
    """A build step with the shell command that performs it."""

    name: str
    command: str


# -----------------------------------------------------------------------------
# Graph Setup
# -----------------------------------------------------------------------------

graph = do.DirectedGraph(capacity_hint=6)
graph.add_nodes(
    Step("configure", "./configure"),
    Step("compile-core", "cc -c core.c"),
    Step("compile-cli", "cc -c cli.c"),
    Step("link", "cc -o app core.o cli.o"),
    Step("test", "./app --self-test"),
)

graph.add_edge("configure", "compile-core")
graph.add_edge("configure", "compile-cli")
graph.add_edge("compile-core", "link")
graph.add_edge("compile-cli", "link")
graph.add_edge("link", "test")


if __name__ == "__main__":
    for step in graph.toposort():
        print(f"{step.name:<14} {step.command}")

    # The graph is unchanged, so it can grow and be sorted again
    graph.add_node(Step("package", "tar czf app.tgz app"))
    graph.add_edge("test", "package")
    print(do.names(graph.toposort()))
