"""
Graph visualization utilities for roster graphs.
"""

import logging
from pathlib import Path
from typing import Hashable, Iterable, Tuple, Union

import matplotlib.pyplot as plt
import networkx as nx

logger = logging.getLogger(__name__)


def plot_roster_graph(
    graph: nx.Graph,
    output_file: Union[str, Path],
    representatives: Iterable[Hashable] = (),
    layout: str = "spring",
    figsize: Tuple[int, int] = (10, 8),
    dpi: int = 150,
    seed: int = 42,
) -> Path:
    """
    Create a visualization of the roster graph.

    Representatives are drawn larger, in a highlight colour, and are the only
    labelled nodes; labelling every player makes league-sized rosters
    unreadable.

    Args:
        graph: Roster graph
        output_file: Path to save the visualization
        representatives: Nodes to highlight
        layout: Graph layout algorithm ('spring', 'kamada_kawai', 'circular')
        figsize: Figure size
        dpi: Output DPI
        seed: Seed for the spring layout

    Returns:
        Path: Path to the saved visualization
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    highlighted = set(representatives)

    logger.info(f"Plotting roster graph with {graph.number_of_nodes()} nodes")

    fig = plt.figure(figsize=figsize)

    if graph.number_of_nodes() > 0:
        if layout == "kamada_kawai":
            pos = nx.kamada_kawai_layout(graph)
        elif layout == "circular":
            pos = nx.circular_layout(graph)
        else:
            pos = nx.spring_layout(graph, k=0.3, iterations=50, seed=seed)

        node_colors = ["orange" if node in highlighted else "skyblue" for node in graph.nodes]
        node_sizes = [300 if node in highlighted else 60 for node in graph.nodes]
        labels = {node: graph.nodes[node]["name"] for node in graph.nodes if node in highlighted}

        nx.draw_networkx_nodes(graph, pos, node_size=node_sizes, node_color=node_colors, alpha=0.8)
        nx.draw_networkx_edges(graph, pos, width=0.5, alpha=0.3)
        nx.draw_networkx_labels(graph, pos, labels=labels, font_size=8)

    plt.axis("off")
    plt.tight_layout()
    plt.savefig(output_file, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info(f"Saved roster graph visualization to {output_file}")

    return output_file
