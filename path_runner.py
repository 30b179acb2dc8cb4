"""
CLI to compute shortest paths for a topology described in YAML.

Reads topologies/reference.yml (or the given file), builds a ShortestPathGraph
for the configured source, prints distance and path for every vertex and can
export the same rows to CSV.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence
import argparse
import csv
import logging
import math

from nodes import Vertex
from graph import Edge, bidirectional_edges
from shortest_path_graph import ShortestPathGraph

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "topologies" / "reference.yml"

RESULT_FIELDS = ["vertex", "distance", "reachable", "hops", "path"]


@dataclass(frozen=True)
class EdgeConfig:
    src: str
    dst: str
    weight: float


@dataclass(frozen=True)
class TopologyConfig:
    source: str
    edges: Sequence[EdgeConfig]
    directed: bool = True


def _parse_edge(raw: Any, index: int) -> EdgeConfig:
    if isinstance(raw, Mapping):
        try:
            src, dst, weight = raw["from"], raw["to"], raw["weight"]
        except KeyError as exc:
            raise ValueError(f"Edge #{index} is missing key {exc.args[0]!r}.") from exc
    elif isinstance(raw, (list, tuple)) and len(raw) == 3:
        src, dst, weight = raw
    else:
        raise ValueError(
            f"Edge #{index} must be [from, to, weight] or a from/to/weight mapping, got {raw!r}."
        )

    try:
        weight = float(weight)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Edge #{index} has non-numeric weight {weight!r}.") from exc
    return EdgeConfig(src=str(src), dst=str(dst), weight=weight)


def load_config(path: Path) -> TopologyConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    if not isinstance(data, Mapping):
        raise ValueError(f"Topology file {path} must contain a mapping.")
    if "source" not in data:
        raise ValueError(f"Topology file {path} has no 'source'.")

    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise ValueError(f"Topology file {path}: 'edges' must be a list.")

    return TopologyConfig(
        source=str(data["source"]),
        edges=[_parse_edge(raw, i) for i, raw in enumerate(raw_edges)],
        directed=bool(data.get("directed", True)),
    )


def build_graph(cfg: TopologyConfig) -> ShortestPathGraph:
    vertices: Dict[str, Vertex] = {}

    def vertex(name: str) -> Vertex:
        return vertices.setdefault(name, Vertex(name))

    edges: List[Edge] = [Edge(vertex(e.src), vertex(e.dst), e.weight) for e in cfg.edges]
    if not cfg.directed:
        edges = bidirectional_edges(edges)

    return ShortestPathGraph(vertex(cfg.source), edges)


def summarize(graph: ShortestPathGraph) -> List[Dict[str, object]]:
    """
    One row per vertex: distance from the source and the path taken.
    """
    rows: List[Dict[str, object]] = []
    for name in graph.vertices():
        v = Vertex(name)
        distance = graph.shortest_distance(v)
        path = graph.path_to(v)
        rows.append(
            {
                "vertex": name,
                "distance": distance,
                "reachable": distance is not None and distance != math.inf,
                "hops": len(path) - 1 if path else 0,
                "path": "->".join(p.name for p in path) if path else "",
            }
        )
    return rows


def write_results_csv(rows: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write per-vertex results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow({key: row.get(key, "") for key in RESULT_FIELDS})


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("config", nargs="?", type=Path, default=DEFAULT_CONFIG)
    parser.add_argument("--csv", type=Path, default=None, help="write per-vertex rows here")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    cfg = load_config(args.config)
    print(f"[run] loaded {len(cfg.edges)} edges from {args.config} (source={cfg.source})")
    graph = build_graph(cfg)

    for name in graph.vertices():
        v = Vertex(name)
        print(f"{name}: {graph.shortest_distance(v)}")
    for name in graph.vertices():
        description = graph.describe_path_to(Vertex(name))
        print(description if description is not None else f"{Vertex(name)} is unreachable")

    if args.csv:
        write_results_csv(summarize(graph), args.csv)
        print(f"[run] wrote {args.csv}")


if __name__ == "__main__":
    main()
