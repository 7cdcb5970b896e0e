"""
Neighborhood similarity between players.

Two players are similar when they share teammates. Similarity is the
Jaccard coefficient of their open neighborhoods.
"""

import logging
from typing import AbstractSet, Dict, Hashable, NamedTuple, Set, Tuple

import networkx as nx

from roster_graph.errors import InsufficientDataError

logger = logging.getLogger(__name__)


class SimilarPair(NamedTuple):
    """An ordered node pair and its Jaccard similarity."""

    u: Hashable
    v: Hashable
    score: float


def collect_neighbors(graph: nx.Graph) -> Dict[Hashable, Set[Hashable]]:
    """Map every node to the set of its direct neighbors, in node order."""
    return {node: set(graph.neighbors(node)) for node in graph.nodes}


def jaccard_similarity(neighbors_u: AbstractSet, neighbors_v: AbstractSet) -> float:
    """
    Jaccard similarity of two neighbor sets.

    Returns 0.0 when both sets are empty.
    """
    union_count = len(neighbors_u | neighbors_v)
    if union_count == 0:
        return 0.0
    return len(neighbors_u & neighbors_v) / union_count


def find_extreme_similarity(graph: nx.Graph) -> Tuple[SimilarPair, SimilarPair]:
    """
    Find the most similar and the most dissimilar pair of nodes.

    Every ordered pair of distinct nodes is compared, both loops running in
    node creation order. The running maximum starts at a score of 0.0 and
    the running minimum at 1.0, both on the first two nodes, and each is
    replaced only by a strictly better score. Ties therefore go to the pair
    seen first.

    Args:
        graph: Roster graph

    Returns:
        Tuple[SimilarPair, SimilarPair]: ``(most_similar, most_dissimilar)``

    Raises:
        InsufficientDataError: If the graph has fewer than two nodes
    """
    if graph.number_of_nodes() < 2:
        raise InsufficientDataError(required=2, actual=graph.number_of_nodes())

    neighbor_sets = collect_neighbors(graph)
    first, second = list(neighbor_sets)[:2]
    most_similar = SimilarPair(first, second, 0.0)
    most_dissimilar = SimilarPair(first, second, 1.0)

    for u, neighbors_u in neighbor_sets.items():
        for v, neighbors_v in neighbor_sets.items():
            if u == v:
                continue
            similarity = jaccard_similarity(neighbors_u, neighbors_v)
            if similarity > most_similar.score:
                most_similar = SimilarPair(u, v, similarity)
            if similarity < most_dissimilar.score:
                most_dissimilar = SimilarPair(u, v, similarity)

    logger.info(
        f"Compared {len(neighbor_sets) * (len(neighbor_sets) - 1):,} ordered pairs: "
        f"max={most_similar.score:.4f}, min={most_dissimilar.score:.4f}"
    )
    return most_similar, most_dissimilar
