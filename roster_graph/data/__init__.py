"""
Roster input for the graph pipeline.
"""

from .roster import RosterEntry, read_players, read_players_from_source

__all__ = ["RosterEntry", "read_players", "read_players_from_source"]
