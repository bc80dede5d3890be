from unittest.mock import Mock

import pytest

from martian_robots.model import (
    Command,
    InstructionLengthError,
    InvalidArgumentError,
    MissingWorldError,
    NegativeCoordinatesError,
    Orientation,
    OutOfBoundsError,
    Position,
    Robot,
    UnknownCommandError,
    World,
)


# Construction

def test_initial_state(world, registry):
    robot = Robot(1, 1, Orientation.N, world, registry)
    assert robot.current_position == Position(1, 1, Orientation.N)
    assert not robot.is_lost
    assert str(robot) == "1 1 N"
    assert robot.path == (Position(1, 1, Orientation.N),)


def test_orientation_letter_accepted(world, registry):
    robot = Robot(0, 0, "w", world, registry)
    assert robot.current_position.orientation == Orientation.W


def test_missing_world_rejected(registry):
    with pytest.raises(MissingWorldError):
        Robot(1, 1, Orientation.N, None, registry)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (-3, -3)])
def test_negative_coordinates_rejected(world, registry, x, y):
    with pytest.raises(NegativeCoordinatesError):
        Robot(x, y, Orientation.N, world, registry)


@pytest.mark.parametrize("x, y", [(6, 0), (0, 4), (10, 10)])
def test_start_outside_world_rejected(world, registry, x, y):
    with pytest.raises(OutOfBoundsError):
        Robot(x, y, Orientation.N, world, registry)


CONSTRUCTION_ERRORS = [MissingWorldError, NegativeCoordinatesError, OutOfBoundsError]


@pytest.mark.parametrize("x, y, use_world, expected", [
    (1, 1, False, MissingWorldError),
    (-1, 1, True, NegativeCoordinatesError),
    (7, 1, True, OutOfBoundsError),
])
def test_each_construction_failure_has_its_own_error(world, registry, x, y, use_world, expected):
    with pytest.raises(InvalidArgumentError) as excinfo:
        Robot(x, y, Orientation.N, world if use_world else None, registry)
    assert type(excinfo.value) is expected
    for other in CONSTRUCTION_ERRORS:
        if other is not expected:
            assert not isinstance(excinfo.value, other)


def test_start_validated_against_world(registry):
    world = Mock(spec=World)
    world.is_position_valid.return_value = False
    with pytest.raises(OutOfBoundsError):
        Robot(1, 1, Orientation.N, world, registry)
    world.is_position_valid.assert_called_once_with(1, 1)


# Instruction processing

def test_scenario_square_returns_home(world, registry):
    robot = Robot(1, 1, Orientation.E, world, registry)
    robot.process_instructions("RFRFRFRF")
    assert str(robot) == "1 1 E"
    assert robot.steps_taken == 8


def test_scenario_falls_off_north_edge(world, registry):
    robot = Robot(3, 2, Orientation.N, world, registry)
    robot.process_instructions("FRRFLLFFRRFLL")
    assert str(robot) == "3 3 N LOST"
    assert robot.is_lost
    assert world.has_scent(3, 3, Orientation.N)


def test_scenario_scent_protects_second_robot(world, registry):
    first = Robot(5, 1, Orientation.E, world, registry)
    first.process_instructions("F")
    assert str(first) == "5 1 E LOST"

    second = Robot(5, 1, Orientation.E, world, registry)
    second.process_instructions("F")
    assert str(second) == "5 1 E"
    assert not second.is_lost
    assert second.ignored_moves == 1


def test_classic_third_robot_uses_scent(world, registry):
    Robot(3, 2, Orientation.N, world, registry).process_instructions("FRRFLLFFRRFLL")
    robot = Robot(0, 3, Orientation.W, world, registry)
    robot.process_instructions("LLFFFLFLFL")
    assert str(robot) == "2 3 S"


@pytest.mark.parametrize("length", [100, 101, 250])
def test_instruction_string_too_long(world, registry, length):
    counting = Mock(wraps=registry)
    robot = Robot(1, 1, Orientation.N, world, counting)
    with pytest.raises(InstructionLengthError):
        robot.process_instructions("L" * length)
    counting.get_command.assert_not_called()
    assert robot.current_position == Position(1, 1, Orientation.N)


def test_instruction_string_just_under_limit(world, registry):
    robot = Robot(1, 1, Orientation.N, world, registry)
    robot.process_instructions("L" * 99)
    assert robot.current_position.orientation == Orientation.E
    assert robot.steps_taken == 99


def test_empty_instructions_are_noop(world, registry):
    robot = Robot(2, 2, Orientation.S, world, registry)
    robot.process_instructions("")
    assert robot.current_position == Position(2, 2, Orientation.S)
    assert robot.steps_taken == 0


def test_processing_stops_when_lost(world, registry):
    robot = Robot(0, 3, Orientation.N, world, registry)
    robot.process_instructions("FRFFFLLL")
    assert str(robot) == "0 3 N LOST"
    assert robot.steps_taken == 1
    assert robot.path[-1] == robot.current_position


def test_symbols_after_loss_are_not_looked_up(world, registry):
    robot = Robot(0, 0, Orientation.S, world, registry)
    robot.process_instructions("FXYZ")
    assert robot.is_lost


def test_unknown_symbol_keeps_earlier_moves(world, registry):
    robot = Robot(1, 1, Orientation.N, world, registry)
    with pytest.raises(UnknownCommandError):
        robot.process_instructions("FFXF")
    assert robot.current_position == Position(1, 3, Orientation.N)


def test_processing_continues_across_calls(world, registry):
    robot = Robot(1, 1, Orientation.N, world, registry)
    robot.process_instructions("F")
    robot.process_instructions("RF")
    assert str(robot) == "2 2 E"


def test_lost_robot_ignores_later_calls(world, registry):
    robot = Robot(5, 3, Orientation.E, world, registry)
    robot.process_instructions("F")
    robot.process_instructions("LLF")
    assert str(robot) == "5 3 E LOST"


def test_positions_are_replaced_not_mutated(world, registry):
    robot = Robot(1, 1, Orientation.N, world, registry)
    before = robot.current_position
    robot.process_instructions("FR")
    assert before == Position(1, 1, Orientation.N)
    assert robot.path == (
        Position(1, 1, Orientation.N),
        Position(1, 2, Orientation.N),
        Position(1, 2, Orientation.E),
    )


def test_custom_command_used_by_robot(world, registry):
    class BackCommand(Command):
        symbol = "B"

        def apply(self, position, world):
            dx, dy = position.orientation.delta
            return position.with_changes(x=position.x - dx, y=position.y - dy)

    registry.register(BackCommand())
    robot = Robot(2, 2, Orientation.N, world, registry)
    robot.process_instructions("BB")
    assert str(robot) == "2 0 N"
