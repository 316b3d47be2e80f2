"""Exceptions raised by the engine and the bot."""


class AISlobsterbleError(Exception):
    """Base class for all errors raised by this package."""


class EngineError(AISlobsterbleError):
    """Raised by the board model and the move engine."""


class PlacementError(EngineError):
    """A placement cannot be laid on the board. Only aborts one candidate."""


class OutOfBounds(PlacementError, IndexError):
    """A coordinate, or a placement walk, left the grid."""

    def __init__(self, row: int, col: int):
        super().__init__(f"({row},{col}) is outside the board")
        self.row = row
        self.col = col


class StartOccupied(PlacementError):
    """The first cell of a placement already holds a tile."""

    def __init__(self, row: int, col: int):
        super().__init__(f"start cell ({row},{col}) is occupied")
        self.row = row
        self.col = col


class BlankCountMismatch(EngineError, ValueError):
    """fill_blanks() got a different number of letters than the rack has blanks."""


class InvariantError(EngineError):
    """Broken internal assumption, e.g. a hole inside a word span."""


class TransportError(AISlobsterbleError):
    """A request to the game service failed or returned unusable data."""
