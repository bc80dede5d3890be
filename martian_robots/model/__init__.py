"""Model package for the Martian Robots simulation."""

from .errors import (
    MartianRobotsError,
    InvalidArgumentError,
    MissingWorldError,
    NegativeCoordinatesError,
    OutOfBoundsError,
    BoundsExceededError,
    InstructionLengthError,
    InvalidInstructionError,
    UnknownCommandError,
)
from .orientation import Orientation
from .state import Position, RobotResult, MissionState
from .world import World
from .commands import Command, TurnLeftCommand, TurnRightCommand, MoveForwardCommand
from .registry import CommandRegistry, default_registry
from .robot import Robot
from .engine import MissionEngine

__all__ = [
    'MartianRobotsError',
    'InvalidArgumentError',
    'MissingWorldError',
    'NegativeCoordinatesError',
    'OutOfBoundsError',
    'BoundsExceededError',
    'InstructionLengthError',
    'InvalidInstructionError',
    'UnknownCommandError',
    'Orientation',
    'Position',
    'RobotResult',
    'MissionState',
    'World',
    'Command',
    'TurnLeftCommand',
    'TurnRightCommand',
    'MoveForwardCommand',
    'CommandRegistry',
    'default_registry',
    'Robot',
    'MissionEngine',
]
