"""
Roster graph analytics.

Builds a player graph from a team roster and reports path statistics,
representative players by closeness centrality, and the most and least
similar player pairs.
"""

__version__ = "0.1.0"
