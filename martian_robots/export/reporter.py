"""Summary report generation for Martian Robots missions."""

from typing import List, Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.state import MissionState, RobotResult


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, source: str, max_x: int, max_y: int):
        self.source = source
        self.max_x = max_x
        self.max_y = max_y
        self.results: List["RobotResult"] = []
        self.first_loss: Optional[int] = None

    def update(self, state: "MissionState") -> None:
        """Record the robot finished in this step."""
        if state.latest is not None:
            self.add_result(state.latest)

    def add_result(self, result: "RobotResult") -> None:
        self.results.append(result)
        if result.lost and self.first_loss is None:
            self.first_loss = result.robot_id

    def generate_summary(self, final_state: "MissionState",
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        total = int(metrics.get('robots_total', 0))
        lost = int(metrics.get('robots_lost', 0))
        failed = int(metrics.get('robots_failed', 0))
        survived = int(metrics.get('robots_completed', 0)) - lost - failed

        survival_pct = (survived / total * 100) if total > 0 else 0

        lines = [
            "",
            "=" * 80,
            "                    MARTIAN ROBOTS MISSION REPORT",
            "=" * 80,
            f"Input:                 {self.source}",
            f"Grid:                  0..{self.max_x} x 0..{self.max_y}",
            "",
            "MISSION METRICS",
            "-" * 40,
            f"Robots:                {total}",
            f"Survived:              {survived} ({survival_pct:.1f}%)",
            f"Lost:                  {lost}",
            f"Failed:                {failed}",
            f"Scents Left:           {int(metrics.get('scents', 0))}",
            f"Protected Moves:       {int(metrics.get('protected_moves', 0))}",
            f"First Robot Lost:      {self.first_loss if self.first_loss else '-'}",
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'robots.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'mission.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
