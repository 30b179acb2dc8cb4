"""
Construction errors raised by ShortestPathGraph.

All of them abort construction; no partial graph is ever returned.
"""


class ShortestPathError(ValueError):
    """Base class for invalid shortest-path graph input."""


class EmptyGraphError(ShortestPathError):
    """No edges were supplied."""


class DisconnectedSourceError(ShortestPathError):
    """The source vertex is not an endpoint of any edge."""


class NegativeWeightError(ShortestPathError):
    """An edge carries a negative (or NaN) weight."""
