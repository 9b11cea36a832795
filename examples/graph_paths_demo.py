"""Example: Path queries and priority queues with algolab

Builds a small road network, compares BFS, DFS and Dijkstra answers,
then shows MinHeap / MaxHeap basics.
"""

import numpy as np

from algolab import Graph, MaxHeap, MinHeap, floyd_warshall, path_weight


def example_path_queries():
    """Example: three ways to get from A to F."""
    print("=" * 60)
    print("Example 1: BFS vs DFS vs Dijkstra")
    print("=" * 60)

    names = ["A", "B", "C", "D", "E", "F"]
    G = Graph(len(names))
    roads = [
        ("A", "B", 7), ("A", "C", 9), ("A", "F", 14),
        ("B", "C", 10), ("B", "D", 15), ("C", "D", 11),
        ("C", "F", 2), ("D", "E", 6), ("F", "E", 9), ("E", "F", 1),
    ]
    for u, v, w in roads:
        G.add_edge(names.index(u), names.index(v), w)

    source, target = names.index("A"), names.index("E")

    bfs = G.bfs_path(source, target)
    dfs = G.dfs_path(source, target)
    best, cost = G.dijkstra_shortest_path(source, target)

    for label, path in [("BFS", bfs), ("DFS", dfs), ("Dijkstra", best)]:
        route = " -> ".join(names[v] for v in path)
        print(f"{label:9s} {route:25s} weight={path_weight(G, path)}")
    print(f"Dijkstra cost: {cost}")

    print("\nAll-pairs distances (Floyd-Warshall):")
    with np.printoptions(precision=0, suppress=True):
        print(floyd_warshall(G))


def example_heaps():
    """Example: draining heaps yields sorted output."""
    print("\n" + "=" * 60)
    print("Example 2: MinHeap and MaxHeap")
    print("=" * 60)

    values = [300, 30, 230, 40, 50, 700, 912]
    min_heap = MinHeap(values)
    max_heap = MaxHeap(values)
    print(f"MinHeap array: {min_heap.items()}")
    print(f"MaxHeap array: {max_heap.items()}")

    min_heap.update(lambda v: v == 912, 1)
    drained = []
    while min_heap:
        drained.append(min_heap.pop())
    print(f"MinHeap after updating 912 -> 1, drained: {drained}")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Path Queries and Heaps - algolab Examples")
    print("=" * 60 + "\n")

    example_path_queries()
    example_heaps()
