"""Cheapest routes through a multistage graph, solved backwards from the end."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

Graph = Sequence[Sequence["int | None"]]

# Adjacency matrices; None marks a missing edge.
STAGE_GRAPH: list[list[int | None]] = [
    [None, 1, 2, 5, None, None, None, None],
    [None, None, None, None, 4, 11, None, None],
    [None, None, None, None, 9, 5, 16, None],
    [None, None, None, None, None, None, 2, None],
    [None, None, None, None, None, None, None, 18],
    [None, None, None, None, None, None, None, 13],
    [None, None, None, None, None, None, None, 2],
    [None, None, None, None, None, None, None, None],
]

ROUTE_GRAPH: list[list[int | None]] = [
    [None, 2, 1, None],
    [None, None, None, 3],
    [None, None, None, 1],
    [None, None, None, None],
]


@dataclass(frozen=True)
class Route:
    """The cost of a route and the nodes it visits, as 0-based indices."""

    cost: int
    nodes: list[int]

    def __str__(self) -> str:
        return "->".join(str(node + 1) for node in self.nodes)


def _check_square(graph: Graph) -> int:
    size = len(graph)
    if size == 0:
        raise ValueError("graph has no nodes")
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square matrix")
    return size


def shortest_distances(graph: Graph) -> list[float]:
    """Distance from every node to the last node; edges only lead forward.

    Nodes that cannot reach the last node get ``math.inf``.
    """
    size = _check_square(graph)
    distances: list[float] = [math.inf] * size
    distances[-1] = 0
    for i in range(size - 2, -1, -1):
        distances[i] = min(
            (
                weight + distances[j]
                for j, weight in enumerate(graph[i][i + 1 :], start=i + 1)
                if weight is not None
            ),
            default=math.inf,
        )
    return distances


def cheapest_route(graph: Graph) -> Route:
    """The cheapest route from the first node to the last one.

    Among equally cheap next steps the lowest-numbered node is taken.
    """
    size = _check_square(graph)
    costs: list[float] = [math.inf] * size
    following = list(range(size))
    costs[-1] = 0
    for i in range(size - 2, -1, -1):
        for j in range(i + 1, size):
            weight = graph[i][j]
            if weight is not None and weight + costs[j] < costs[i]:
                costs[i] = weight + costs[j]
                following[i] = j
    if math.isinf(costs[0]):
        raise ValueError("the last node cannot be reached from the first")
    nodes = [0]
    while nodes[-1] != size - 1:
        nodes.append(following[nodes[-1]])
    return Route(cost=int(costs[0]), nodes=nodes)


def main(argv: list[str] | None = None) -> int:
    """Print the distance from a chosen node, or the cheapest full route."""
    parser = argparse.ArgumentParser(prog="multistage")
    parser.add_argument("mode", nargs="?", choices=("distance", "route"), default="distance")
    args = parser.parse_args(argv)

    if args.mode == "route":
        route = cheapest_route(ROUTE_GRAPH)
        print(f"Minimum Cost: {route.cost}")
        print(f"Path: {route}")
        return 0

    print("Sources Node: ", end="")
    tokens = sys.stdin.read().split()
    try:
        source = int(tokens[0])
    except (IndexError, ValueError):
        print("expected a node number", file=sys.stderr)
        return 1
    distances = shortest_distances(STAGE_GRAPH)
    if not 0 <= source < len(distances):
        print(f"node must be between 0 and {len(distances) - 1}", file=sys.stderr)
        return 1
    last = len(distances) - 1
    print(f"Minimum distance to visit node {last} is: {distances[source]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())