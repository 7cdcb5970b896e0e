"""
Core graph functionality for roster graphs.

This module provides functions to:
1. Build the undirected player graph from roster entries
2. Compute all-pairs shortest-path lengths by breadth-first search
3. Calculate the average shortest-path distance
"""

import logging
from typing import Dict, Hashable, Iterable, List, Tuple

import networkx as nx
from tqdm import tqdm

logger = logging.getLogger(__name__)


def build_graph(players: Iterable[Tuple[str, str]]) -> nx.Graph:
    """
    Build the roster graph.

    Each player becomes a node, numbered by input position and carrying the
    display name as the ``name`` attribute. A new player is connected to
    every earlier player of the same team, so each team ends up a clique and
    different teams are never connected.

    Args:
        players: Ordered ``(name, group)`` pairs, e.g. ``RosterEntry`` rows

    Returns:
        nx.Graph: The frozen roster graph
    """
    logger.info("Building roster graph")

    G = nx.Graph()
    team_map: Dict[str, List[int]] = {}

    for node, (name, team) in enumerate(players):
        G.add_node(node, name=name)
        peers = team_map.setdefault(team, [])
        for peer in peers:
            G.add_edge(peer, node)
        peers.append(node)

    logger.info(f"Roster graph: |V|={G.number_of_nodes():,}, |E|={G.number_of_edges():,}")

    return nx.freeze(G)


def shortest_path_lengths(
    graph: nx.Graph,
    show_progress: bool = False,
) -> Dict[Hashable, Dict[Hashable, int]]:
    """
    Compute hop distances from every node to every node it can reach.

    Each source's map includes the source itself at distance 0; unreachable
    nodes are left out rather than given an infinite distance.

    Args:
        graph: Roster graph
        show_progress: Whether to display a progress bar over sources

    Returns:
        Dict mapping source node to a dict of target node to hop count
    """
    return {
        source: nx.single_source_shortest_path_length(graph, source)
        for source in tqdm(graph.nodes, desc="Shortest paths", disable=not show_progress)
    }


def calculate_average_distance(graph: nx.Graph, show_progress: bool = False) -> float:
    """
    Calculate the average shortest-path distance of the graph.

    Every distance observed from every source is counted, including the
    zero-length observation of each source to itself, so a single edge
    averages to 0.5. A graph with no observations averages to 0.0.

    Args:
        graph: Roster graph
        show_progress: Whether to display a progress bar over sources

    Returns:
        float: Mean of all finite distance observations
    """
    total_distance = 0
    count = 0
    for path_lengths in shortest_path_lengths(graph, show_progress).values():
        total_distance += sum(path_lengths.values())
        count += len(path_lengths)

    average = total_distance / max(count, 1)
    logger.info(f"Average distance over {count:,} observations: {average:.4f}")
    return average
