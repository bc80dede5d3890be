"""Configuration dataclasses, YAML loader and text input parser for Martian Robots."""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Iterable, Tuple
from pathlib import Path
import sys
import yaml

from .model.orientation import Orientation


@dataclass
class WorldConfig:
    max_x: int
    max_y: int


@dataclass
class RobotSpec:
    x: int
    y: int
    orientation: Orientation
    instructions: str = ""


@dataclass
class SimulationConfig:
    world: WorldConfig
    robots: List[RobotSpec]
    workers: int = 1

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = False
    snapshot_enabled: bool = False
    gif_enabled: bool = False
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def _parse_int(value: Any, what: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be an integer, got {value!r}") from None


def _parse_position(text: str) -> Tuple[int, int, Orientation]:
    """Parse an "x y O" position string."""
    parts = str(text).split()
    if len(parts) != 3:
        raise ValueError(f"Expected position 'x y orientation', got {text!r}")
    return (_parse_int(parts[0], "x"),
            _parse_int(parts[1], "y"),
            Orientation.parse(parts[2]))


def _parse_bounds(text: str) -> WorldConfig:
    """Parse a "max_x max_y" bounds string."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Expected grid bounds 'max_x max_y', got {text!r}")
    return WorldConfig(max_x=_parse_int(parts[0], "max_x"),
                       max_y=_parse_int(parts[1], "max_y"))


def _parse_robots(robots_raw: List[Dict]) -> List[RobotSpec]:
    """Parse robot specifications from raw YAML data."""
    robots = []
    for i, r in enumerate(robots_raw, start=1):
        if not isinstance(r, dict):
            raise ValueError(f"Robot #{i} must be a mapping, got {r!r}")
        if 'position' in r:
            x, y, orientation = _parse_position(r['position'])
        else:
            try:
                x = _parse_int(r['x'], "x")
                y = _parse_int(r['y'], "y")
                orientation = Orientation.parse(r['orientation'])
            except KeyError as e:
                raise ValueError(f"Robot #{i} is missing key {e}") from None
        instructions = r.get('instructions') or ''
        robots.append(RobotSpec(x=x, y=y, orientation=orientation,
                                instructions=str(instructions).strip()))
    return robots


def _section(raw: Dict, name: str) -> Dict:
    """Return an optional mapping section, empty when absent."""
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping, got {section!r}")
    return section


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from None

    if not isinstance(raw, dict):
        raise ValueError(f"Configuration must be a mapping: {config_path}")

    # Parse world bounds
    try:
        world_raw = raw['world']
        world = WorldConfig(
            max_x=_parse_int(world_raw['max_x'], "max_x"),
            max_y=_parse_int(world_raw['max_y'], "max_y")
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Missing world bounds in configuration: {e}") from None

    robots_raw = raw.get('robots') or []
    if not isinstance(robots_raw, list):
        raise ValueError(f"'robots' must be a list, got {robots_raw!r}")
    robots = _parse_robots(robots_raw)

    # Parse simulation and export sections (optional)
    sim_raw = _section(raw, 'simulation')
    export_raw = _section(raw, 'export')

    return SimulationConfig(
        world=world,
        robots=robots,
        workers=_parse_int(sim_raw.get('workers', 1), "workers"),
        csv_enabled=export_raw.get('csv', False),
        snapshot_enabled=export_raw.get('snapshot', False),
        gif_enabled=export_raw.get('gif', False)
    )


def parse_mission_text(lines: Iterable[str]) -> SimulationConfig:
    """
    Parse the plain text mission format.

    The first non-blank line holds the grid bounds, followed by one pair
    of lines per robot: its position ("x y O") and its instruction string.
    Blank lines between robots are skipped; an instruction line may be
    empty.
    """
    world = None
    robots: List[RobotSpec] = []
    pending = None

    for lineno, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        try:
            if pending is not None:
                x, y, orientation = pending
                robots.append(RobotSpec(x, y, orientation, line))
                pending = None
            elif not line:
                continue
            elif world is None:
                world = _parse_bounds(line)
            else:
                pending = _parse_position(line)
        except ValueError as e:
            raise ValueError(f"Line {lineno}: {e}") from None

    if world is None:
        raise ValueError("Mission input is empty: expected grid bounds")
    if pending is not None:
        robots.append(RobotSpec(*pending))

    return SimulationConfig(world=world, robots=robots)


def load_mission_file(input_path: Path) -> SimulationConfig:
    """Read a text mission from a file, or from stdin when the path is '-'."""
    if str(input_path) == '-':
        return parse_mission_text(sys.stdin)
    with open(input_path) as f:
        return parse_mission_text(f)
