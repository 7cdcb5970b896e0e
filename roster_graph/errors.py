"""
Exceptions raised by the roster graph package.
"""


class RosterGraphError(ValueError):
    """Base class for roster graph errors."""


class InsufficientDataError(RosterGraphError):
    """Raised when an analysis needs more nodes than the graph has."""

    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(
            f"Graph must contain at least {required} nodes, found {actual}"
        )


class RosterFormatError(RosterGraphError):
    """Raised when a roster file is missing a required column."""
