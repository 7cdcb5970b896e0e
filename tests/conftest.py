"""
Pytest configuration file for the roster graph project.

This file contains shared fixtures for the test suite.
"""
import networkx as nx
import pytest

from roster_graph.data.roster import RosterEntry


ROSTER_CSV = """Player,Tm
LeBron James,LAL
Anthony Davis,LAL
Kevin Durant,BKN
Kyrie Irving,BKN"""


@pytest.fixture
def roster_csv(tmp_path):
    """
    Write a small two-team roster to a CSV file.

    Returns:
        Path: Path to the roster CSV file
    """
    csv_path = tmp_path / "roster.csv"
    csv_path.write_text(ROSTER_CSV)
    return csv_path


@pytest.fixture
def two_team_roster():
    """Roster with two teams of two players."""
    return [
        RosterEntry("LeBron James", "LAL"),
        RosterEntry("Anthony Davis", "LAL"),
        RosterEntry("Kevin Durant", "BKN"),
        RosterEntry("Kyrie Irving", "BKN"),
    ]


@pytest.fixture
def path_graph():
    """
    Create the three-node path Node 1 - Node 2 - Node 3.

    A team clique can't produce a path, so the graph is built directly.
    """
    G = nx.Graph()
    G.add_node(0, name="Node 1")
    G.add_node(1, name="Node 2")
    G.add_node(2, name="Node 3")
    G.add_edge(0, 1)
    G.add_edge(1, 2)
    return G


@pytest.fixture
def single_edge_graph():
    """Two nodes joined by one edge."""
    G = nx.Graph()
    G.add_node(0, name="Node A")
    G.add_node(1, name="Node B")
    G.add_edge(0, 1)
    return G
