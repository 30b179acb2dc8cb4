"""
Algorithm interfaces for shortest-path computation.

Keeps the relaxation loop separate from input validation and query handling.
"""

from abc import ABC, abstractmethod
from typing import Dict

from nodes import Vertex
from graph import Graph


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> tuple[Dict[str, float], Dict[str, Vertex]]:
        """
        Compute shortest-path costs plus the predecessor of each reached vertex.

        Returns:
            (dist, prev) where dist maps every vertex name in the graph to its
            cost from source (math.inf when unreachable) and prev maps each
            reached non-source vertex name to its parent on the shortest path.
        """
        raise NotImplementedError
