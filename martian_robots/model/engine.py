"""Mission engine running a sequence of robots on one shared World."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Dict, Optional, TYPE_CHECKING

from .errors import MartianRobotsError
from .registry import CommandRegistry
from .robot import Robot
from .state import MissionState, Position, RobotResult
from .world import World

if TYPE_CHECKING:
    from ..config import RobotSpec, SimulationConfig

logger = logging.getLogger(__name__)


class MissionEngine:
    """
    Orchestrates a mission: one World, many robots, run in input order.

    Implements:
    1. World and command registry initialization
    2. One robot per step, each leaving its scent for the next
    3. Concurrent execution of all robots against the shared World
    4. State snapshot generation
    """

    def __init__(self, config: "SimulationConfig",
                 registry: Optional[CommandRegistry] = None):
        self.config = config
        self.current_step = 0

        self.world = World(config.world.max_x, config.world.max_y)
        self.registry = registry or CommandRegistry.with_defaults()

        self.results: List[RobotResult] = []
        self.paths: Dict[int, List[Position]] = {}

    def _run_robot(self, robot_id: int, spec: "RobotSpec") -> RobotResult:
        """Build one robot, execute its instructions and collect the result."""
        start = Position(spec.x, spec.y, spec.orientation)
        try:
            robot = Robot(spec.x, spec.y, spec.orientation,
                          self.world, self.registry)
        except MartianRobotsError as e:
            logger.debug("Robot %d rejected: %s", robot_id, e)
            self.paths[robot_id] = [start]
            return RobotResult(robot_id, start, start, spec.instructions,
                               0, 0, error=str(e))

        error = None
        try:
            robot.process_instructions(spec.instructions)
        except MartianRobotsError as e:
            logger.debug("Robot %d stopped: %s", robot_id, e)
            error = str(e)

        self.paths[robot_id] = list(robot.path)
        return RobotResult(
            robot_id=robot_id,
            start=start,
            final=robot.current_position,
            instructions=spec.instructions,
            steps_taken=robot.steps_taken,
            ignored_moves=robot.ignored_moves,
            error=error
        )

    def step(self) -> MissionState:
        """
        Run the next robot of the mission.

        Robots that fail validation or hit an unknown instruction are
        recorded with their error; the mission carries on with the next one.
        """
        if self.is_finished():
            raise RuntimeError("Mission already finished")

        spec = self.config.robots[self.current_step]
        self.current_step += 1
        result = self._run_robot(self.current_step, spec)
        self.results.append(result)
        return self._create_state_snapshot()

    def run(self, strict: bool = False) -> List[RobotResult]:
        """
        Run every remaining robot in order.

        With strict=True the first robot error is raised as a
        MartianRobotsError instead of being recorded.
        """
        while not self.is_finished():
            state = self.step()
            if strict and state.latest.error:
                raise MartianRobotsError(
                    f"Robot {state.latest.robot_id}: {state.latest.error}"
                )
        return list(self.results)

    def run_concurrent(self, workers: Optional[int] = None) -> List[RobotResult]:
        """
        Run every remaining robot at once on a thread pool.

        All robots share the World, so when several reach the same edge
        only the first to record its scent is lost. Which one that is
        depends on scheduling. Results come back in input order.
        """
        workers = workers or self.config.workers
        first_id = self.current_step + 1
        pending = self.config.robots[self.current_step:]

        with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
            futures = [
                pool.submit(self._run_robot, robot_id, spec)
                for robot_id, spec in enumerate(pending, start=first_id)
            ]
            results = [f.result() for f in futures]

        self.current_step = len(self.config.robots)
        self.results.extend(results)
        return results

    def _create_state_snapshot(self) -> MissionState:
        """Create snapshot of current mission state."""
        metrics = {
            'robots_total': len(self.config.robots),
            'robots_completed': len(self.results),
            'robots_lost': sum(1 for r in self.results if r.lost),
            'robots_failed': sum(1 for r in self.results if r.error),
            'scents': len(self.world),
            'protected_moves': sum(r.ignored_moves for r in self.results),
        }

        return MissionState(
            step=self.current_step,
            robots=list(self.results),
            paths={k: list(v) for k, v in self.paths.items()},
            scent_grid=self.world.scent_grid(),
            metrics=metrics
        )

    def snapshot(self) -> MissionState:
        return self._create_state_snapshot()

    def is_finished(self) -> bool:
        """Check if every robot has been run."""
        return self.current_step >= len(self.config.robots)

    def get_summary(self) -> Dict:
        """Get summary statistics for the mission."""
        return self._create_state_snapshot().metrics
