"""
Shortest-path graph pre-computed for a fixed source vertex.

Construction validates the edge list, builds the adjacency index and runs the
Dijkstra engine eagerly. Afterwards every query is a lookup into read-only
maps, so one instance can be shared freely between readers.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple
import logging
import math

from nodes import Vertex
from graph import Edge
from adjacency_list_graph import AdjacencyListGraph
from algorithms import DijkstraEngine
from dijkstra_engine import SimpleDijkstraEngine
from errors import DisconnectedSourceError, EmptyGraphError, NegativeWeightError

logger = logging.getLogger(__name__)


class ShortestPathGraph:
    """
    Best distances and predecessors from `source` to every vertex in `edges`.

    Queries signal "vertex never part of the graph" with None, which is
    distinct from math.inf for a known vertex that cannot be reached.
    """

    def __init__(
        self,
        source: Vertex,
        edges: Iterable[Edge],
        engine: Optional[DijkstraEngine] = None,
    ) -> None:
        edge_list: Tuple[Edge, ...] = tuple(edges)
        self._validate_input(source, edge_list)

        graph = AdjacencyListGraph(edge_list)
        engine = engine if engine is not None else SimpleDijkstraEngine()
        dist, prev = engine.shortest_paths(graph, source)

        self._source = source
        self._edges = edge_list
        self._graph = graph
        self._best_distances: Mapping[str, float] = MappingProxyType(dict(dist))
        self._predecessors: Mapping[str, Vertex] = MappingProxyType(dict(prev))

        logger.debug(
            "built shortest-path graph from %s: %d vertices, %d edges, %d reachable",
            source.name,
            len(self._best_distances),
            len(edge_list),
            sum(1 for d in self._best_distances.values() if d != math.inf),
        )

    @staticmethod
    def _validate_input(source: Vertex, edges: Sequence[Edge]) -> None:
        if not edges:
            raise EmptyGraphError("Edges should not be empty.")

        for e in edges:
            # `not >=` also rejects NaN weights.
            if not e.weight >= 0:
                raise NegativeWeightError(
                    f"Edge {e.src.name}->{e.dst.name} has weight {e.weight}; "
                    "weights must be non-negative."
                )

        if not any(source.name in (e.src.name, e.dst.name) for e in edges):
            raise DisconnectedSourceError(
                f"Edges should include the source vertex {source.name!r}."
            )

    # --- Read-only state -----------------------------------------------------

    @property
    def source(self) -> Vertex:
        return self._source

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def best_distances(self) -> Mapping[str, float]:
        return self._best_distances

    @property
    def predecessors(self) -> Mapping[str, Vertex]:
        return self._predecessors

    @property
    def adjacency(self) -> Mapping[str, Tuple[Edge, ...]]:
        return self._graph.adjacency

    def vertices(self) -> Tuple[str, ...]:
        """Names of all vertices mentioned by the edges, in first-seen order."""
        return tuple(self._graph.vertex_names())

    def __contains__(self, v: object) -> bool:
        return isinstance(v, Vertex) and v.name in self._best_distances

    # --- Queries -------------------------------------------------------------

    def shortest_distance(self, v: Vertex) -> Optional[float]:
        """
        Best distance from the source to v.

        Returns math.inf when v is known but unreachable, None when v never
        appeared in any edge.
        """
        return self._best_distances.get(v.name)

    def path_to(self, v: Vertex) -> Optional[List[Vertex]]:
        """
        Vertices on the shortest path from the source to v, source first.

        Returns None when v is unreachable or unknown.
        """
        if v.name == self._source.name:
            return [self._source]

        parent = self._predecessors.get(v.name)
        if parent is None:
            return None

        path: List[Vertex] = [v]
        while parent is not None:
            path.append(parent)
            parent = self._predecessors.get(parent.name)
        path.reverse()
        return path

    def describe_path_to(self, v: Vertex) -> Optional[str]:
        """
        Human readable rendering of path_to(v) with its total distance.

        e.g. "Vertex(A) -> Vertex(B) - total 1 away from source".
        """
        if v.name == self._source.name:
            return f"{self._source} is a source"

        path = self.path_to(v)
        if path is None:
            return None

        total = _format_number(self._best_distances[v.name])
        hops = " -> ".join(str(p) for p in path)
        return f"{hops} - total {total} away from source"


def _format_number(x: float) -> str:
    # 2.0 -> "2", 2.5 -> "2.5"
    if x != math.inf and float(x).is_integer():
        return str(int(x))
    return str(x)
