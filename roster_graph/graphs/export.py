"""
Export utilities for roster graphs and analysis results.
"""

import json
import logging
from pathlib import Path
from typing import Union

import graphviz
import networkx as nx
import polars as pl
from networkx.readwrite import json_graph

logger = logging.getLogger(__name__)


def export_graph(graph: nx.Graph, filename: Union[str, Path]) -> Path:
    """
    Write the graph to a file in DOT format.

    Nodes are labelled with the player's display name and edges carry no
    label. Only the DOT source is written; render it with Graphviz, e.g.
    ``dot -Tpng roster_graph.dot -o roster_graph.png``.

    Args:
        graph: Roster graph
        filename: Path of the DOT file to write

    Returns:
        Path: Path to the saved DOT file
    """
    output_file = Path(filename)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    dot = graphviz.Graph(name="roster")
    for node, name in graph.nodes(data="name"):
        dot.node(str(node), label=str(name))
    for u, v in graph.edges():
        dot.edge(str(u), str(v))

    dot.save(filename=str(output_file))
    logger.info(f"Exported graph to {output_file}")

    return output_file


def export_graph_json(graph: nx.Graph, filename: Union[str, Path]) -> Path:
    """
    Export the graph to node-link JSON for visualization.

    Args:
        graph: Roster graph
        filename: Path of the JSON file to write

    Returns:
        Path: Path to the saved JSON file
    """
    output_file = Path(filename)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    data = json_graph.node_link_data(graph)
    with open(output_file, "w") as f:
        json.dump(data, f)

    logger.info(f"Exported graph with {len(data['nodes'])} nodes to {output_file}")
    return output_file


def export_table(table: pl.DataFrame, filename: Union[str, Path]) -> Path:
    """Write a results table (representatives, closeness) to Parquet."""
    output_file = Path(filename)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    table.write_parquet(output_file)
    logger.info(f"Saved {len(table)} rows to {output_file}")

    return output_file
