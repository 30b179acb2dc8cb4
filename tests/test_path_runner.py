import csv
import math
from pathlib import Path

import pytest

from errors import DisconnectedSourceError
from nodes import Vertex
from path_runner import (
    DEFAULT_CONFIG,
    EdgeConfig,
    TopologyConfig,
    build_graph,
    load_config,
    main,
    summarize,
    write_results_csv,
)


def test_reference_config_loads_and_solves():
    """Bundled reference topology yields the known distances."""
    cfg = load_config(DEFAULT_CONFIG)
    assert cfg.source == "A"
    assert len(cfg.edges) == 6

    g = build_graph(cfg)
    dists = {name: g.shortest_distance(Vertex(name)) for name in g.vertices()}
    assert dists == {"A": 0, "B": 1, "C": 2, "D": 7, "E": 10}


def test_load_config_accepts_mapping_edges_and_undirected(tmp_path: Path):
    cfg_path = tmp_path / "topo.yml"
    cfg_path.write_text(
        """
source: X
directed: false
edges:
  - {from: X, to: Y, weight: 2}
  - [Y, Z, 3.5]
"""
    )

    cfg = load_config(cfg_path)
    assert cfg == TopologyConfig(
        source="X",
        edges=[EdgeConfig("X", "Y", 2.0), EdgeConfig("Y", "Z", 3.5)],
        directed=False,
    )

    g = build_graph(cfg)
    assert g.shortest_distance(Vertex("Z")) == 5.5
    # undirected: reverse edges exist
    assert ("Y", "X") in {(e.src.name, e.dst.name) for e in g.edges}


@pytest.mark.parametrize(
    "body",
    [
        "- just a list\n",
        "edges: []\n",
        "source: A\nedges: {A: B}\n",
        "source: A\nedges:\n  - [A, B]\n",
        "source: A\nedges:\n  - {from: A, to: B}\n",
        "source: A\nedges:\n  - [A, B, heavy]\n",
    ],
)
def test_malformed_config_raises_value_error(tmp_path: Path, body: str):
    cfg_path = tmp_path / "bad.yml"
    cfg_path.write_text(body)

    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_build_graph_propagates_validation_errors():
    cfg = TopologyConfig(source="Q", edges=[EdgeConfig("A", "B", 1.0)])

    with pytest.raises(DisconnectedSourceError):
        build_graph(cfg)


def test_summarize_and_csv_export(tmp_path: Path):
    cfg = TopologyConfig(
        source="A",
        edges=[EdgeConfig("A", "B", 1.0), EdgeConfig("C", "B", 1.0)],
    )
    rows = summarize(build_graph(cfg))

    by_vertex = {row["vertex"]: row for row in rows}
    assert by_vertex["A"]["path"] == "A"
    assert by_vertex["A"]["hops"] == 0
    assert by_vertex["B"]["path"] == "A->B"
    assert by_vertex["B"]["hops"] == 1
    assert by_vertex["C"]["distance"] == math.inf
    assert by_vertex["C"]["reachable"] is False

    out = tmp_path / "out" / "results.csv"
    write_results_csv(rows, out)
    with out.open() as f:
        written = list(csv.DictReader(f))
    assert [r["vertex"] for r in written] == ["A", "B", "C"]
    assert written[1]["distance"] == "1.0"
    assert written[2]["path"] == ""


def test_main_prints_report_and_writes_csv(tmp_path: Path, capsys):
    out = tmp_path / "report.csv"

    main([str(DEFAULT_CONFIG), "--csv", str(out)])

    printed = capsys.readouterr().out
    assert "Vertex(A) is a source" in printed
    assert "Vertex(A) -> Vertex(B) -> Vertex(C) - total 2 away from source" in printed
    assert out.exists()
