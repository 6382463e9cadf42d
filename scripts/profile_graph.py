"""
Profiling script for pygraphsfx node/edge bookkeeping.

This script profiles graph construction, drag propagation through edge
bindings and node removal on random graphs of increasing size.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time

import numpy as np
from pygraphsfx import Graph, GraphNode


def create_graph(n_nodes, n_edges):
    """Create a random graph with n nodes and approximately n_edges edges."""
    graph = Graph()
    nodes = [GraphNode(f"n{i}") for i in range(n_nodes)]
    for i, node in enumerate(nodes):
        node.name = f"n{i:05d}"
        graph.add_node(node)

    rng = np.random.default_rng(42)
    for _ in range(n_edges):
        source, target = rng.integers(0, n_nodes, size=2)
        if source != target:
            nodes[source].add_adjacency(nodes[target])

    return graph, nodes


def profile_build(n_nodes, n_edges):
    """Profile attaching nodes and creating edges."""
    def run():
        create_graph(n_nodes, n_edges)
    return run


def profile_drag(n_nodes, n_edges, moves=200):
    """Profile dragging the best connected node while edges are observed."""
    def run():
        graph, nodes = create_graph(n_nodes, n_edges)
        for edge in graph.edges:
            edge.start_x.add_listener(lambda v: v.get())
            edge.end_x.add_listener(lambda v: v.get())
        hub = max(nodes, key=lambda n: len(n.adjacencies))
        hub.drag_controller.press(0, 0)
        for i in range(moves):
            hub.drag(i, i)
        hub.release()
        graph.edge_segments()
    return run


def profile_remove(n_nodes, n_edges):
    """Profile detaching every node."""
    def run():
        graph, nodes = create_graph(n_nodes, n_edges)
        for node in nodes:
            graph.remove_node(node)
    return run


def benchmark_scenario(name, func, limit=15):
    """Run func under cProfile and report the hottest functions by own time."""
    print(f"\n--- {name} ---")

    profiler = cProfile.Profile()
    started = time.perf_counter()
    profiler.runcall(func)
    elapsed = time.perf_counter() - started

    out = io.StringIO()
    stats = pstats.Stats(profiler, stream=out)
    stats.strip_dirs().sort_stats(SortKey.TIME).print_stats(limit)
    print(f"wall {elapsed * 1000:.1f} ms, {stats.total_calls} calls")
    print(out.getvalue())

    return elapsed


def main():
    """Run all profiling scenarios."""
    print("pygraphsfx Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Build (1000 nodes, 3000 edges)", profile_build(1000, 3000)),
        ("Drag hub (1000 nodes, 3000 edges)", profile_drag(1000, 3000)),
        ("Remove all (1000 nodes, 3000 edges)", profile_remove(1000, 3000)),
    ]

    total = sum(benchmark_scenario(name, func) for name, func in scenarios)
    print(f"all scenarios: {total:.2f}s")


if __name__ == "__main__":
    main()
