"""Visualization and export for Martian Robots missions."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.state import MissionState


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation, one frame per robot
    """

    # Color scheme
    COLORS = {
        'floor': '#ECF0F1',     # Light gray
        'scent': '#F39C12',     # Orange
        'path': '#3498DB',      # Blue
        'active': '#27AE60',    # Green
        'lost': '#E74C3C',      # Red
        'failed': '#95A5A6',    # Gray
    }

    # Marker pointing the way the robot faces
    HEADING_MARKERS = {'N': '^', 'E': '>', 'S': 'v', 'W': '<'}

    def __init__(self, max_x: int, max_y: int):
        self.width = max(max_x, 0) + 1
        self.height = max(max_y, 0) + 1
        self.frames: List[Image.Image] = []

    def _create_figure(self, state: "MissionState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        aspect = self.width / self.height
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        # Base layer: floor
        base = np.ones((self.height, self.width, 3))
        base[:, :] = to_rgb(self.COLORS['floor'])

        # Overlay scent cells, stronger with more scented headings
        scents = state.scent_grid[:self.height, :self.width]
        if scents.size and np.max(scents) > 0:
            normalized = scents / 4.0
            scent_rgb = to_rgb(self.COLORS['scent'])
            for c in range(3):
                base[:scents.shape[0], :scents.shape[1], c] = np.clip(
                    base[:scents.shape[0], :scents.shape[1], c] * (1 - normalized) +
                    scent_rgb[c] * normalized,
                    0, 1
                )

        ax.imshow(base, origin='lower', aspect='equal',
                  extent=[-0.5, self.width - 0.5, -0.5, self.height - 0.5])

        # Draw robot paths and final positions
        for result in state.robots:
            path = state.paths.get(result.robot_id, [])
            if len(path) > 1:
                ax.plot([p.x for p in path], [p.y for p in path], '-',
                        color=self.COLORS['path'], linewidth=1, alpha=0.5)

            final = result.final
            if result.error:
                ax.plot(final.x, final.y, 'x', color=self.COLORS['failed'],
                        markersize=8)
            elif final.lost:
                ax.plot(final.x, final.y, 'X', color=self.COLORS['lost'],
                        markersize=10, markeredgecolor='black', markeredgewidth=0.5)
            else:
                marker = self.HEADING_MARKERS[final.orientation.value]
                ax.plot(final.x, final.y, marker, color=self.COLORS['active'],
                        markersize=10, markeredgecolor='black', markeredgewidth=0.5)
            ax.annotate(str(result.robot_id), (final.x, final.y),
                        textcoords='offset points', xytext=(6, 6), fontsize=7)

        ax.set_title(f'Robot {state.step} | '
                     f'Lost: {int(state.metrics.get("robots_lost", 0))} | '
                     f'Scents: {int(state.metrics.get("scents", 0))}')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.set_xticks(range(self.width))
        ax.set_yticks(range(self.height))

        ax.set_xlim(-0.5, self.width - 0.5)
        ax.set_ylim(-0.5, self.height - 0.5)

        legend_elements = [
            plt.Line2D([0], [0], marker='^', color='w', label='Active',
                       markerfacecolor=self.COLORS['active'], markersize=8),
            plt.Line2D([0], [0], marker='X', color='w', label='Lost',
                       markerfacecolor=self.COLORS['lost'], markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Scent',
                       markerfacecolor=self.COLORS['scent'], markersize=8),
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=8)

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "MissionState") -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "MissionState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 2) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
