"""
Pipeline node function definitions for roster graph analytics.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import networkx as nx
import polars as pl
from kedro.pipeline import Pipeline, node

from roster_graph.data.roster import RosterEntry, read_players
from roster_graph.errors import InsufficientDataError
from roster_graph.graphs.clustering import (
    calculate_closeness_centrality,
    representatives_from_centralities,
)
from roster_graph.graphs.core import build_graph, calculate_average_distance
from roster_graph.graphs.export import export_graph, export_graph_json, export_table
from roster_graph.graphs.similarity import find_extreme_similarity
from roster_graph.graphs.visualization import plot_roster_graph
from roster_graph.settings import DEFAULT_ROSTER_PARAMS


logger = logging.getLogger(__name__)


def load_roster_node(params: Dict[str, Any]) -> List[RosterEntry]:
    """
    Node function for reading the roster CSV.

    Args:
        params: Pipeline parameters

    Returns:
        List[RosterEntry]: Roster entries in file order
    """
    return read_players(
        params.get("input_path", DEFAULT_ROSTER_PARAMS["input_path"]),
        name_column=params.get("name_column", DEFAULT_ROSTER_PARAMS["name_column"]),
        group_column=params.get("group_column", DEFAULT_ROSTER_PARAMS["group_column"]),
    )


def build_roster_graph_node(players: List[RosterEntry]) -> nx.Graph:
    """Node function for building the roster graph."""
    return build_graph(players)


def compute_path_statistics_node(graph: nx.Graph, params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Node function for the average distance and the closeness table.

    Args:
        graph: Roster graph
        params: Pipeline parameters

    Returns:
        Dict[str, Any]: ``average_distance`` and a ``closeness`` DataFrame
    """
    show_progress = params.get("show_progress", DEFAULT_ROSTER_PARAMS["show_progress"])
    average_distance = calculate_average_distance(graph, show_progress)
    centralities = calculate_closeness_centrality(graph, show_progress)

    closeness = pl.DataFrame(
        {
            "node": list(centralities.keys()),
            "name": [graph.nodes[n]["name"] for n in centralities],
            "closeness": list(centralities.values()),
        },
        schema={"node": pl.Int64, "name": pl.Utf8, "closeness": pl.Float64},
    )

    return {"average_distance": average_distance, "closeness": closeness}


def select_representatives_node(
    graph: nx.Graph,
    path_statistics: Dict[str, Any],
    params: Dict[str, Any],
) -> pl.DataFrame:
    """
    Node function for picking the top-k representatives.

    Ranks the closeness table from ``compute_path_statistics`` instead of
    running the breadth-first searches again.
    """
    closeness = path_statistics["closeness"]
    centralities = dict(zip(closeness["node"].to_list(), closeness["closeness"].to_list()))
    k = int(params.get("top_k", DEFAULT_ROSTER_PARAMS["top_k"]))
    return representatives_from_centralities(graph, centralities, k)


def find_similarity_extremes_node(graph: nx.Graph) -> Dict[str, Any]:
    """
    Node function for the most and least similar pairs.

    A graph too small to compare is reported and skipped; the node then
    returns an empty dict.
    """
    try:
        most_similar, most_dissimilar = find_extreme_similarity(graph)
    except InsufficientDataError as e:
        logger.warning(f"Skipping similarity analysis: {e}")
        return {}

    return {"most_similar": most_similar, "most_dissimilar": most_dissimilar}


def export_roster_graph_node(
    graph: nx.Graph,
    path_statistics: Dict[str, Any],
    representatives: pl.DataFrame,
    params: Dict[str, Any],
) -> Dict[str, str]:
    """
    Node function for writing the graph and the result tables to disk.

    File names come from the ``*_file`` parameters, relative to ``output_dir``.

    Args:
        graph: Roster graph
        path_statistics: Output of ``compute_path_statistics``
        representatives: Representatives table
        params: Pipeline parameters

    Returns:
        Dict[str, str]: Paths of the written files keyed by kind
    """
    output_dir = Path(params.get("output_dir", DEFAULT_ROSTER_PARAMS["output_dir"]))
    output_dir.mkdir(parents=True, exist_ok=True)

    def output_path(key):
        return output_dir / params.get(key, DEFAULT_ROSTER_PARAMS[key])

    outputs = {
        "dot": export_graph(graph, output_path("dot_file")),
        "representatives": export_table(representatives, output_path("representatives_file")),
        "closeness": export_table(path_statistics["closeness"], output_path("closeness_file")),
    }

    if params.get("export_json", DEFAULT_ROSTER_PARAMS["export_json"]):
        outputs["json"] = export_graph_json(graph, output_path("json_file"))

    if params.get("plot", DEFAULT_ROSTER_PARAMS["plot"]):
        outputs["plot"] = plot_roster_graph(
            graph,
            output_path("plot_file"),
            representatives=representatives["node"].to_list(),
        )

    return {kind: str(path) for kind, path in outputs.items()}


def summarize_results_node(
    graph: nx.Graph,
    path_statistics: Dict[str, Any],
    representatives: pl.DataFrame,
    similarity_extremes: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Node function for collecting the results into a report.

    Nodes are reported by display name.
    """

    def describe(pair):
        if pair is None:
            return None
        return {
            "players": (graph.nodes[pair.u]["name"], graph.nodes[pair.v]["name"]),
            "nodes": (pair.u, pair.v),
            "score": pair.score,
        }

    return {
        "nodes": graph.number_of_nodes(),
        "edges": graph.number_of_edges(),
        "average_distance": path_statistics["average_distance"],
        "representatives": representatives["name"].to_list(),
        "most_similar": describe(similarity_extremes.get("most_similar")),
        "most_dissimilar": describe(similarity_extremes.get("most_dissimilar")),
    }


def create_pipeline(**kwargs) -> Pipeline:
    """Create the roster graph analytics pipeline."""
    return Pipeline(
        [
            node(
                load_roster_node,
                inputs="params:roster",
                outputs="roster_records",
                name="load_roster",
            ),
            node(
                build_roster_graph_node,
                inputs="roster_records",
                outputs="roster_graph",
                name="build_roster_graph",
            ),
            node(
                compute_path_statistics_node,
                inputs=["roster_graph", "params:roster"],
                outputs="path_statistics",
                name="compute_path_statistics",
            ),
            node(
                select_representatives_node,
                inputs=["roster_graph", "path_statistics", "params:roster"],
                outputs="representatives",
                name="select_representatives",
            ),
            node(
                find_similarity_extremes_node,
                inputs="roster_graph",
                outputs="similarity_extremes",
                name="find_similarity_extremes",
            ),
            node(
                export_roster_graph_node,
                inputs=["roster_graph", "path_statistics", "representatives", "params:roster"],
                outputs="export_files",
                name="export_roster_graph",
            ),
            node(
                summarize_results_node,
                inputs=["roster_graph", "path_statistics", "representatives", "similarity_extremes"],
                outputs="roster_report",
                name="summarize_results",
            ),
        ]
    )
