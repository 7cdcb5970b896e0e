"""
Closeness centrality and representative player selection.
"""

import logging
from typing import Dict, Hashable, List

import networkx as nx
import polars as pl

from roster_graph.graphs.core import shortest_path_lengths

logger = logging.getLogger(__name__)


def calculate_closeness_centrality(
    graph: nx.Graph,
    show_progress: bool = False,
) -> Dict[Hashable, float]:
    """
    Calculate closeness centrality for every node.

    Centrality is ``(N - 1) / total_distance`` where ``N`` is the number of
    nodes in the whole graph and ``total_distance`` is the sum of hop
    distances to every reachable node. This differs from
    ``nx.closeness_centrality``, which scales by the reachable fraction.
    Nodes that reach nothing (``total_distance == 0``) get no entry.

    Args:
        graph: Roster graph
        show_progress: Whether to display a progress bar over sources

    Returns:
        Dict[Hashable, float]: Centrality per node, in node order
    """
    node_count = graph.number_of_nodes()
    centralities = {}

    for node, path_lengths in shortest_path_lengths(graph, show_progress).items():
        total_distance = sum(path_lengths.values())
        if total_distance > 0:
            centralities[node] = (node_count - 1) / total_distance

    return centralities


def find_representatives(graph: nx.Graph, k: int) -> List[Hashable]:
    """
    Find the ``k`` most central nodes.

    Nodes are ranked by descending closeness centrality. The sort is stable,
    so equal scores keep node creation order. Fewer than ``k`` nodes are
    returned when fewer have a centrality score.

    Args:
        graph: Roster graph
        k: Number of representatives to return

    Returns:
        List[Hashable]: Representative nodes, most central first
    """
    return _top_k(calculate_closeness_centrality(graph), k)


def _top_k(centralities: Dict[Hashable, float], k: int) -> List[Hashable]:
    if k <= 0:
        return []
    ranked = sorted(centralities, key=lambda node: centralities[node], reverse=True)
    return ranked[:k]


def representatives_table(graph: nx.Graph, k: int) -> pl.DataFrame:
    """Rank, node, display name and centrality of the top ``k`` representatives."""
    return representatives_from_centralities(graph, calculate_closeness_centrality(graph), k)


def representatives_from_centralities(
    graph: nx.Graph,
    centralities: Dict[Hashable, float],
    k: int,
) -> pl.DataFrame:
    """
    Build the representatives table from an existing centrality table.

    Args:
        graph: Roster graph the centralities were computed on
        centralities: Closeness centrality per node, in node order
        k: Number of representatives to return

    Returns:
        pl.DataFrame: ``rank``, ``node``, ``name`` and ``closeness`` columns
    """
    representatives = _top_k(centralities, k)

    table = pl.DataFrame(
        {
            "rank": list(range(1, len(representatives) + 1)),
            "node": representatives,
            "name": [graph.nodes[node]["name"] for node in representatives],
            "closeness": [centralities[node] for node in representatives],
        },
        schema={
            "rank": pl.Int64,
            "node": pl.Int64,
            "name": pl.Utf8,
            "closeness": pl.Float64,
        },
    )

    logger.info(f"Selected {len(table)} representatives (k={k})")
    return table
