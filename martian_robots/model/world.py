"""Grid world with bounds and scent markers for the Martian Robots simulation."""

import logging
import threading
import numpy as np
from typing import FrozenSet, Tuple

from .errors import BoundsExceededError
from .orientation import Orientation

logger = logging.getLogger(__name__)

ScentKey = Tuple[int, int, Orientation]


class World:
    """
    Bounded rectangular grid shared by every robot of a mission.

    Valid coordinates form the inclusive rectangle [0, max_x] x [0, max_y].
    Scent markers record the (x, y, orientation) from which a robot fell
    off the grid. The marker set only grows and is safe to update from
    several threads at once.
    """

    MAX_COORDINATE = 50

    def __init__(self, max_x: int, max_y: int):
        if max_x > self.MAX_COORDINATE or max_y > self.MAX_COORDINATE:
            raise BoundsExceededError(
                f"Coordinates cannot exceed {self.MAX_COORDINATE} "
                f"(got {max_x}, {max_y})"
            )
        self.max_x = max_x
        self.max_y = max_y

        self._scents: set = set()
        self._lock = threading.Lock()

    def is_position_valid(self, x: int, y: int) -> bool:
        """Check if (x, y) lies within the grid bounds."""
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y

    def try_record_marker(self, x: int, y: int, orientation: Orientation) -> bool:
        """
        Record a scent at (x, y, orientation) if none is there yet.

        Returns True only for the caller that inserted the marker, so among
        concurrent callers with the same triple exactly one gets True.
        """
        key = (x, y, orientation)
        with self._lock:
            if key in self._scents:
                recorded = False
            else:
                self._scents.add(key)
                recorded = True

        if recorded:
            logger.debug("Scent recorded at %s %s %s", x, y, orientation.value)
        else:
            logger.debug("Scent already present at %s %s %s", x, y, orientation.value)
        return recorded

    def has_scent(self, x: int, y: int, orientation: Orientation) -> bool:
        with self._lock:
            return (x, y, orientation) in self._scents

    @property
    def scents(self) -> FrozenSet[ScentKey]:
        """Snapshot of all recorded scent markers."""
        with self._lock:
            return frozenset(self._scents)

    def scent_grid(self) -> np.ndarray:
        """
        Count scented orientations per cell.

        Coordinate convention: (x, y) for API, [y, x] for array indexing.
        """
        grid = np.zeros((max(self.max_y, -1) + 1, max(self.max_x, -1) + 1),
                        dtype=np.int32)
        for x, y, _ in self.scents:
            if self.is_position_valid(x, y):
                grid[y, x] += 1
        return grid

    def __len__(self) -> int:
        with self._lock:
            return len(self._scents)

    def __repr__(self) -> str:
        return f"World(max_x={self.max_x}, max_y={self.max_y}, scents={len(self)})"
