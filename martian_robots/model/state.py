"""State dataclasses for the Martian Robots simulation."""

from dataclasses import dataclass, replace
from typing import List, Dict, Optional
import numpy as np

from .orientation import Orientation


@dataclass(frozen=True)
class Position:
    """Immutable robot position: grid coordinates, heading and lost flag."""
    x: int
    y: int
    orientation: Orientation
    lost: bool = False

    def with_changes(self, **changes) -> "Position":
        """Return a copy with the given fields overridden."""
        return replace(self, **changes)

    def __str__(self) -> str:
        text = f"{self.x} {self.y} {self.orientation.value}"
        return f"{text} LOST" if self.lost else text


@dataclass(frozen=True)
class RobotResult:
    """Outcome of running one robot's instructions."""
    robot_id: int
    start: Position
    final: Position
    instructions: str
    steps_taken: int
    ignored_moves: int
    error: Optional[str] = None

    @property
    def lost(self) -> bool:
        return self.final.lost

    def to_csv_row(self) -> Dict:
        return {
            "robot_id": self.robot_id,
            "x": self.final.x,
            "y": self.final.y,
            "orientation": self.final.orientation.value,
            "lost": self.final.lost,
            "instructions": self.instructions,
            "steps": self.steps_taken,
            "error": self.error or "",
        }

    def __str__(self) -> str:
        if self.error:
            return f"ERROR: {self.error}"
        return str(self.final)


@dataclass
class MissionState:
    """Snapshot of the mission after a robot has finished."""
    step: int
    robots: List[RobotResult]
    paths: Dict[int, List[Position]]
    scent_grid: np.ndarray  # Copy of per-cell scent counts, [y, x]
    metrics: Dict[str, float]

    @property
    def latest(self) -> Optional[RobotResult]:
        return self.robots[-1] if self.robots else None
