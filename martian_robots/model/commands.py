"""Robot commands: each one turns a Position into the next Position."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .orientation import LEFT_TURNS, RIGHT_TURNS
from .state import Position

if TYPE_CHECKING:
    from .world import World

logger = logging.getLogger(__name__)


class Command(ABC):
    """
    A single-character instruction a robot can execute.

    Commands are stateless; the same instance is shared by every robot
    using a registry.
    """

    symbol: str = ""

    @abstractmethod
    def apply(self, position: Position, world: "World") -> Position:
        """Return the position reached by executing this command."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(symbol={self.symbol!r})"


class TurnLeftCommand(Command):
    symbol = "L"

    def apply(self, position: Position, world: "World") -> Position:
        # Unknown headings are left as they are
        turned = LEFT_TURNS.get(position.orientation, position.orientation)
        return position.with_changes(orientation=turned)


class TurnRightCommand(Command):
    symbol = "R"

    def apply(self, position: Position, world: "World") -> Position:
        turned = RIGHT_TURNS.get(position.orientation, position.orientation)
        return position.with_changes(orientation=turned)


class MoveForwardCommand(Command):
    """
    Move one grid point in the direction the robot is facing.

    A move that would leave the grid either loses the robot, leaving a
    scent at its last position, or is ignored when a previous robot has
    already left a scent there with the same heading.
    """
    symbol = "F"

    def apply(self, position: Position, world: "World") -> Position:
        dx, dy = position.orientation.delta
        nx, ny = position.x + dx, position.y + dy

        if world.is_position_valid(nx, ny):
            return position.with_changes(x=nx, y=ny)

        if world.try_record_marker(position.x, position.y, position.orientation):
            logger.debug("Robot lost moving off grid from %s", position)
            return position.with_changes(lost=True)

        logger.debug("Scent protected move ignored at %s", position)
        return position
