"""
Directed, weighted graph abstraction.

Vertices are Vertex instances.
Edges are directed: src -> dst with a non-negative weight. Undirected graphs
are expressed as one edge per direction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from nodes import Vertex


@dataclass(frozen=True)
class Edge:
    """
    Directed weighted connection src -> dst.

    Several edges may join the same ordered pair; relaxation keeps the lighter.
    """
    src: Vertex
    dst: Vertex
    weight: float


class Graph(ABC):
    """Directed, weighted graph keyed by vertex name."""

    @abstractmethod
    def vertex_names(self) -> Iterable[str]:
        """Return the names of all vertices mentioned by any edge."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, name: str) -> Sequence[Edge]:
        """
        Outgoing edges of the named vertex, in input order.

        Returns an empty sequence for vertices without outgoing edges.
        """
        raise NotImplementedError


def bidirectional_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Mirror every edge so the result describes an undirected graph."""
    mirrored: List[Edge] = []
    for e in edges:
        mirrored.append(e)
        mirrored.append(Edge(e.dst, e.src, e.weight))
    return mirrored
