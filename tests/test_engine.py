import pytest

from martian_robots.config import RobotSpec, SimulationConfig, WorldConfig
from martian_robots.model import (
    BoundsExceededError,
    MartianRobotsError,
    MissionEngine,
    Orientation,
    Position,
)


def make_config(robots, max_x=5, max_y=3, workers=1):
    return SimulationConfig(
        world=WorldConfig(max_x, max_y),
        robots=[RobotSpec(x, y, Orientation(o), instr) for x, y, o, instr in robots],
        workers=workers,
    )


CLASSIC = [
    (1, 1, "E", "RFRFRFRF"),
    (3, 2, "N", "FRRFLLFFRRFLL"),
    (0, 3, "W", "LLFFFLFLFL"),
]


def test_classic_mission():
    engine = MissionEngine(make_config(CLASSIC))
    results = engine.run()
    assert [str(r) for r in results] == ["1 1 E", "3 3 N LOST", "2 3 S"]
    assert engine.is_finished()


def test_step_returns_snapshots():
    engine = MissionEngine(make_config(CLASSIC))

    state = engine.step()
    assert state.step == 1
    assert state.latest.robot_id == 1
    assert state.metrics['robots_lost'] == 0
    assert state.scent_grid.sum() == 0

    state = engine.step()
    assert state.metrics['robots_lost'] == 1
    assert state.metrics['scents'] == 1
    assert state.scent_grid[3, 3] == 1

    state = engine.step()
    assert state.metrics['protected_moves'] == 1
    assert state.metrics['robots_completed'] == 3
    assert len(state.paths[3]) == 11


def test_step_after_finish_raises():
    engine = MissionEngine(make_config([]))
    assert engine.is_finished()
    with pytest.raises(RuntimeError):
        engine.step()


def test_snapshot_is_detached_from_world():
    engine = MissionEngine(make_config([(5, 1, "E", "F")]))
    before = engine.snapshot()
    engine.run()
    assert before.scent_grid.sum() == 0
    assert engine.snapshot().scent_grid[1, 5] == 1


def test_bad_robot_recorded_and_mission_continues():
    engine = MissionEngine(make_config([
        (9, 9, "N", "F"),
        (1, 1, "N", "FFQ"),
        (0, 0, "S", "F"),
    ]))
    results = engine.run()

    assert "out of world boundaries" in results[0].error
    assert results[0].final == Position(9, 9, Orientation.N)
    assert "Unknown command" in results[1].error
    assert results[1].final == Position(1, 3, Orientation.N)
    assert str(results[2]) == "0 0 S LOST"
    assert engine.get_summary()['robots_failed'] == 2


def test_strict_run_raises_first_error():
    engine = MissionEngine(make_config([(1, 1, "N", "F" * 100)]))
    with pytest.raises(MartianRobotsError):
        engine.run(strict=True)


def test_world_bounds_validated():
    with pytest.raises(BoundsExceededError):
        MissionEngine(make_config([], max_x=51))


def test_concurrent_robots_at_same_edge_lose_exactly_one():
    robots = [(5, 1, "E", "F")] * 20
    engine = MissionEngine(make_config(robots, workers=8))
    results = engine.run_concurrent()

    assert [r.robot_id for r in results] == list(range(1, 21))
    assert sum(1 for r in results if r.lost) == 1
    assert all(str(r.final) in ("5 1 E", "5 1 E LOST") for r in results)
    assert engine.is_finished()
    assert engine.get_summary()['protected_moves'] == 19


def test_concurrent_independent_robots_match_sequential():
    robots = [(x, 0, "N", "FFLFRF") for x in range(1, 6)]
    sequential = MissionEngine(make_config(robots)).run()
    concurrent = MissionEngine(make_config(robots, workers=4)).run_concurrent()
    assert [str(r) for r in concurrent] == [str(r) for r in sequential]
