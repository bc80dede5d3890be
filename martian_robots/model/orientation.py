"""Compass orientation for robots on the grid."""

from enum import Enum
from typing import Tuple

from .errors import InvalidArgumentError


class Orientation(Enum):
    """
    The four compass directions a robot can face.

    Rotation follows the 4-cycle N -> W -> S -> E -> N when turning left
    and the reverse when turning right.
    """
    N = "N"
    E = "E"
    S = "S"
    W = "W"

    def left(self) -> "Orientation":
        return LEFT_TURNS[self]

    def right(self) -> "Orientation":
        return RIGHT_TURNS[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit (dx, dy) step when moving forward."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, text: str) -> "Orientation":
        """Parse a single orientation letter, case-insensitive."""
        if isinstance(text, cls):
            return text
        try:
            return cls(str(text).strip().upper())
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown orientation: {text!r} (expected one of N, E, S, W)"
            ) from None

    def __str__(self) -> str:
        return self.value


LEFT_TURNS = {
    Orientation.N: Orientation.W,
    Orientation.W: Orientation.S,
    Orientation.S: Orientation.E,
    Orientation.E: Orientation.N,
}

RIGHT_TURNS = {after: before for before, after in LEFT_TURNS.items()}

_DELTAS = {
    Orientation.N: (0, 1),
    Orientation.E: (1, 0),
    Orientation.S: (0, -1),
    Orientation.W: (-1, 0),
}
