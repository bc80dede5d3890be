"""Robot state machine executing instruction strings against a World."""

import logging
from typing import List, Tuple, Union, TYPE_CHECKING

from .errors import (
    InstructionLengthError,
    MissingWorldError,
    NegativeCoordinatesError,
    OutOfBoundsError,
)
from .orientation import Orientation
from .state import Position

if TYPE_CHECKING:
    from .registry import CommandRegistry
    from .world import World

logger = logging.getLogger(__name__)


class Robot:
    """
    A single robot on the grid.

    The robot is either active or lost. Each instruction symbol is looked
    up in the registry and applied to the current position; once the robot
    is lost the rest of the instruction string is skipped, so a robot never
    moves again after falling off the grid.
    """

    MAX_INSTRUCTION_LENGTH = 100

    def __init__(self, x: int, y: int,
                 orientation: Union[Orientation, str],
                 world: "World",
                 registry: "CommandRegistry"):
        if world is None:
            raise MissingWorldError("A robot needs a world to move in")
        if x < 0 or y < 0:
            raise NegativeCoordinatesError(
                f"Coordinates cannot be negative (got {x}, {y})"
            )
        if not world.is_position_valid(x, y):
            raise OutOfBoundsError(
                f"Initial position ({x}, {y}) is out of world boundaries"
            )

        self.world = world
        self.registry = registry
        self._position = Position(x, y, Orientation.parse(orientation))
        self._path: List[Position] = [self._position]
        self.steps_taken = 0
        self.ignored_moves = 0

    @property
    def current_position(self) -> Position:
        return self._position

    @property
    def is_lost(self) -> bool:
        return self._position.lost

    @property
    def path(self) -> Tuple[Position, ...]:
        """Every position held so far, starting with the initial one."""
        return tuple(self._path)

    def process_instructions(self, instructions: str) -> Position:
        """
        Execute the instruction string and return the final position.

        Raises InstructionLengthError before anything runs when the string
        is too long, and UnknownCommandError at the first symbol with no
        registered command; commands before that symbol stay applied.
        """
        if len(instructions) >= self.MAX_INSTRUCTION_LENGTH:
            raise InstructionLengthError(
                f"Instruction string must be shorter than "
                f"{self.MAX_INSTRUCTION_LENGTH} characters "
                f"(got {len(instructions)})"
            )

        for symbol in instructions:
            if self.is_lost:
                break
            command = self.registry.get_command(symbol)
            self._advance(command.apply(self._position, self.world))

        if self.is_lost:
            logger.debug("Robot lost at %s", self._position)
        return self._position

    def _advance(self, new_position: Position) -> None:
        """Replace the current position with the result of a command."""
        if new_position == self._position:
            self.ignored_moves += 1
        self.steps_taken += 1
        self._position = new_position
        self._path.append(new_position)

    def __str__(self) -> str:
        return str(self._position)

    def __repr__(self) -> str:
        return (f"Robot(pos={self._position}, "
                f"steps={self.steps_taken})")
