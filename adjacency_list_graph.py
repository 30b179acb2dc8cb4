"""
Concrete directed, weighted graph built once from an edge list.

Implements the Graph interface with a name -> (outgoing edges) index. There is
no mutation API: the index is assembled in the constructor and only read
afterwards.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from graph import Edge, Graph


class AdjacencyListGraph(Graph):
    """
    Read-only adjacency index grouping edges by their src vertex name.
    """

    def __init__(self, edges: Iterable[Edge]) -> None:
        grouped: Dict[str, List[Edge]] = {}
        names: Dict[str, None] = {}  # insertion-ordered set

        for e in edges:
            grouped.setdefault(e.src.name, []).append(e)
            names.setdefault(e.src.name)
            names.setdefault(e.dst.name)

        self._adj: Mapping[str, Tuple[Edge, ...]] = MappingProxyType(
            {name: tuple(out) for name, out in grouped.items()}
        )
        self._names: Tuple[str, ...] = tuple(names)

    @property
    def adjacency(self) -> Mapping[str, Tuple[Edge, ...]]:
        """Read-only view of name -> outgoing edges."""
        return self._adj

    def has_outgoing(self, name: str) -> bool:
        return name in self._adj

    # --- Graph interface -----------------------------------------------------

    def vertex_names(self) -> Iterable[str]:
        return self._names

    def outgoing(self, name: str) -> Sequence[Edge]:
        return self._adj.get(name, ())
