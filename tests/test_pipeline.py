"""
Tests for the roster graph pipeline and its entry point.
"""
from pathlib import Path

import polars as pl
import pytest

from roster_graph.graphs import clustering, core
from roster_graph.graphs.core import build_graph, shortest_path_lengths
from roster_graph.main import main, parse_args, run_pipeline
from roster_graph.pipeline import create_pipeline
from roster_graph.pipeline.nodes import (
    compute_path_statistics_node,
    find_similarity_extremes_node,
    summarize_results_node,
    select_representatives_node,
)
from roster_graph.pipeline_registry import register_pipelines


@pytest.fixture
def pipeline_params(roster_csv, tmp_path):
    """Parameters pointing the pipeline at the test roster."""
    return {
        "input_path": str(roster_csv),
        "output_dir": str(tmp_path / "graph"),
        "top_k": 2,
    }


def test_create_pipeline_nodes():
    pipeline = create_pipeline()
    assert {n.name for n in pipeline.nodes} == {
        "load_roster",
        "build_roster_graph",
        "compute_path_statistics",
        "select_representatives",
        "find_similarity_extremes",
        "export_roster_graph",
        "summarize_results",
    }
    assert pipeline.inputs() == {"params:roster"}
    assert pipeline.outputs() == {"export_files", "roster_report"}


def test_register_pipelines():
    pipelines = register_pipelines()
    assert set(pipelines) == {"__default__", "roster"}


def test_compute_path_statistics_node(path_graph):
    stats = compute_path_statistics_node(path_graph, {"show_progress": True})

    assert stats["average_distance"] == pytest.approx(8 / 9)
    assert stats["closeness"]["name"].to_list() == ["Node 1", "Node 2", "Node 3"]


def test_select_representatives_node(path_graph):
    stats = compute_path_statistics_node(path_graph, {})
    table = select_representatives_node(path_graph, stats, {"top_k": 1})
    assert table["node"].to_list() == [1]


def test_select_representatives_node_ranks_closeness_table(path_graph):
    stats = {
        "closeness": pl.DataFrame(
            {"node": [0, 1, 2], "name": ["Node 1", "Node 2", "Node 3"], "closeness": [0.9, 0.1, 0.5]}
        )
    }
    table = select_representatives_node(path_graph, stats, {"top_k": 2})
    assert table["node"].to_list() == [0, 2]


def test_find_similarity_extremes_node_skips_small_graph(caplog):
    graph = build_graph([("Solo", "T1")])
    assert find_similarity_extremes_node(graph) == {}
    assert "Skipping similarity analysis" in caplog.text


def test_summarize_results_node(path_graph):
    stats = compute_path_statistics_node(path_graph, {})
    report = summarize_results_node(
        path_graph,
        stats,
        select_representatives_node(path_graph, stats, {"top_k": 2}),
        find_similarity_extremes_node(path_graph),
    )

    assert report["nodes"] == 3
    assert report["edges"] == 2
    assert report["representatives"] == ["Node 2", "Node 1"]
    assert report["most_similar"]["players"] == ("Node 1", "Node 3")
    assert report["most_similar"]["score"] == 1.0
    assert report["most_dissimilar"]["players"] == ("Node 1", "Node 2")


def test_run_pipeline(pipeline_params):
    outputs = run_pipeline(pipeline_params)
    report = outputs["roster_report"]

    assert report["nodes"] == 4
    assert report["edges"] == 2
    assert report["average_distance"] == 0.5
    assert report["representatives"] == ["LeBron James", "Anthony Davis"]
    assert report["most_similar"]["score"] >= 0.0
    assert report["most_dissimilar"]["score"] >= 0.0

    files = outputs["export_files"]
    assert set(files) == {"dot", "json", "representatives", "closeness"}
    for path in files.values():
        assert Path(path).exists()

    closeness = pl.read_parquet(files["closeness"])
    assert closeness["name"].to_list() == [
        "LeBron James",
        "Anthony Davis",
        "Kevin Durant",
        "Kyrie Irving",
    ]
    assert closeness["closeness"].to_list() == [3.0, 3.0, 3.0, 3.0]


def test_run_pipeline_computes_distances_twice(pipeline_params, monkeypatch):
    """Average distance and closeness each take one all-pairs pass; representatives reuse it."""
    calls = []

    def counting_shortest_path_lengths(graph, show_progress=False):
        calls.append(graph.number_of_nodes())
        return shortest_path_lengths(graph, show_progress)

    monkeypatch.setattr(core, "shortest_path_lengths", counting_shortest_path_lengths)
    monkeypatch.setattr(clustering, "shortest_path_lengths", counting_shortest_path_lengths)

    outputs = run_pipeline(pipeline_params)

    assert calls == [4, 4]
    assert outputs["roster_report"]["representatives"] == ["LeBron James", "Anthony Davis"]


def test_run_pipeline_custom_file_names(pipeline_params, tmp_path):
    pipeline_params.update(
        {
            "json_file": "league.json",
            "representatives_file": "top_players.parquet",
            "closeness_file": "centrality.parquet",
        }
    )
    files = run_pipeline(pipeline_params)["export_files"]

    output_dir = tmp_path / "graph"
    assert Path(files["json"]) == output_dir / "league.json"
    assert Path(files["representatives"]) == output_dir / "top_players.parquet"
    assert Path(files["closeness"]) == output_dir / "centrality.parquet"
    assert not (output_dir / "representatives.parquet").exists()
    for path in files.values():
        assert Path(path).exists()


def test_run_pipeline_single_player(tmp_path):
    roster = tmp_path / "solo.csv"
    roster.write_text("Player,Tm\nSolo Player,LAL")

    outputs = run_pipeline({"input_path": str(roster), "output_dir": str(tmp_path / "out")})
    report = outputs["roster_report"]

    assert report["nodes"] == 1
    assert report["average_distance"] == 0.0
    assert report["representatives"] == []
    assert report["most_similar"] is None
    assert report["most_dissimilar"] is None


def test_parse_args_only_sets_given_options():
    args = parse_args(["--input", "roster.csv", "--top-k", "3"])
    assert args.input_path == "roster.csv"
    assert args.top_k == 3
    assert args.plot is None
    assert args.export_json is None

    args = parse_args(["--plot", "--no-json"])
    assert args.plot is True
    assert args.export_json is False


def test_main(roster_csv, tmp_path):
    output_dir = tmp_path / "cli"
    outputs = main([
        "--input", str(roster_csv),
        "--output-dir", str(output_dir),
        "--dot-file", "nba_graph.dot",
        "--no-json",
        "--plot",
    ])

    files = outputs["export_files"]
    assert set(files) == {"dot", "representatives", "closeness", "plot"}
    assert (output_dir / "nba_graph.dot").exists()
    assert (output_dir / "roster_graph.png").exists()
    assert len(outputs["roster_report"]["representatives"]) == 4
