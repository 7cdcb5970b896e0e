"""
Roster loading utilities.

A roster is a CSV file with one row per player and at least a name column
and a team column. Rows are returned in file order, since node identity in
the roster graph is the input position.
"""

import logging
from pathlib import Path
from typing import IO, List, NamedTuple, Union

import polars as pl

from roster_graph.errors import RosterFormatError
from roster_graph.settings import DEFAULT_GROUP_COLUMN, DEFAULT_NAME_COLUMN

logger = logging.getLogger(__name__)


class RosterEntry(NamedTuple):
    """A single roster row: the player's display name and team."""

    name: str
    group: str


def read_players(
    filepath: Union[str, Path],
    name_column: str = DEFAULT_NAME_COLUMN,
    group_column: str = DEFAULT_GROUP_COLUMN,
) -> List[RosterEntry]:
    """
    Read a roster CSV file.

    Args:
        filepath: Path to the roster CSV file
        name_column: Column holding the player display name
        group_column: Column holding the team (group) value

    Returns:
        List[RosterEntry]: Roster entries in file order

    Raises:
        FileNotFoundError: If the file does not exist
        RosterFormatError: If a required column is missing
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Roster file {filepath} does not exist")

    logger.info(f"Reading roster from {filepath}")
    return read_players_from_source(filepath, name_column, group_column)


def read_players_from_source(
    source: Union[str, Path, bytes, IO],
    name_column: str = DEFAULT_NAME_COLUMN,
    group_column: str = DEFAULT_GROUP_COLUMN,
) -> List[RosterEntry]:
    """
    Read roster entries from any CSV source polars can read.

    Every column is read as a string so player names such as ``"1"`` stay
    intact. Rows with a null name or team are skipped.
    """
    df = pl.read_csv(source, infer_schema_length=0)

    missing = [col for col in (name_column, group_column) if col not in df.columns]
    if missing:
        raise RosterFormatError(
            f"Roster is missing required column(s): {', '.join(missing)}"
        )

    df = df.select([
        pl.col(name_column).alias("name"),
        pl.col(group_column).alias("group"),
    ])

    complete = df.filter(pl.col("name").is_not_null() & pl.col("group").is_not_null())
    skipped = len(df) - len(complete)
    if skipped:
        logger.warning(
            f"Skipped {skipped} roster rows with a missing name or team; "
            "node numbers no longer match file rows"
        )

    players = [RosterEntry(name, group) for name, group in complete.iter_rows()]
    logger.info(f"Loaded {len(players)} players")
    return players
