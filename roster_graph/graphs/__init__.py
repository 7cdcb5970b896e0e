"""
Graph analytics module for roster graphs.

This module builds and analyzes the player graph:
- Roster graph: players joined to every teammate
- Path statistics: average shortest-path distance
- Clustering: representative players by closeness centrality
- Similarity: most and least similar players by shared teammates
"""
