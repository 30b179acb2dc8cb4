"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from typing import Dict, List, Set, Tuple
import heapq
import itertools
import logging
import math

from nodes import Vertex
from graph import Graph
from algorithms import DijkstraEngine

logger = logging.getLogger(__name__)


class DistanceQueue:
    """
    Min-priority queue of (vertex, tentative distance) ordered by distance only.

    A running counter sits between the distance and the vertex in each heap
    entry, so vertices are never compared and equal distances pop in push
    order.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Vertex]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, vertex: Vertex, distance: float) -> None:
        heapq.heappush(self._heap, (distance, next(self._counter), vertex))

    def pop(self) -> Tuple[Vertex, float]:
        distance, _, vertex = heapq.heappop(self._heap)
        return vertex, distance


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    Stale queue entries are never removed eagerly: an entry for a vertex that
    is already settled is skipped when popped, and relaxation never targets a
    settled vertex.

    Complexity:
        O((V + E) log V).
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> tuple[Dict[str, float], Dict[str, Vertex]]:
        """
        Run Dijkstra from source and return (dist, prev).

        Every vertex of the graph starts at infinity and the source at 0. A
        neighbour's predecessor is replaced only on a strict improvement, so
        among equal-cost paths the first one relaxed is kept.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

        dist: Dict[str, float] = {name: math.inf for name in graph.vertex_names()}
        dist[source.name] = 0.0
        prev: Dict[str, Vertex] = {}
        visited: Set[str] = set()

        pq = DistanceQueue()
        pq.push(source, 0.0)
        self.last_heap_pushes += 1

        while pq:
            u, d_u = pq.pop()
            self.last_heap_pops += 1

            # Stale entry for an already settled vertex.
            if u.name in visited:
                continue

            for edge in graph.outgoing(u.name):
                self.last_edges_examined += 1
                w = edge.dst
                if w.name in visited:
                    continue

                alt = d_u + edge.weight
                if alt < dist[w.name]:
                    dist[w.name] = alt
                    prev[w.name] = u
                    pq.push(w, alt)
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

            visited.add(u.name)

        logger.debug(
            "dijkstra from %s settled %d/%d vertices (pops=%d pushes=%d examined=%d relaxed=%d)",
            source.name,
            len(visited),
            len(dist),
            self.last_heap_pops,
            self.last_heap_pushes,
            self.last_edges_examined,
            self.last_relaxed,
        )
        return dist, prev
