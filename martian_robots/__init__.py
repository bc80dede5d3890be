"""Martian Robots: robots on a bounded grid that leave a scent where they fall off."""

from .model import (
    Orientation,
    Position,
    World,
    CommandRegistry,
    Robot,
    MissionEngine,
)

__version__ = "0.1.0"

__all__ = [
    'Orientation',
    'Position',
    'World',
    'CommandRegistry',
    'Robot',
    'MissionEngine',
]
