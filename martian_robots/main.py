#!/usr/bin/env python3
"""
Martian Robots Simulation

Robots move over a rectangular grid following L/R/F instructions. A robot
that moves off the grid is lost and leaves a scent that stops later robots
from falling off at the same place and heading.

Usage:
    martian-robots --input mission.txt [options]
    martian-robots --config configs/sample.yaml [options]

Examples:
    martian-robots --input mission.txt
    martian-robots --input - < mission.txt --quiet
    martian-robots --config configs/sample.yaml --snapshot --gif --out-dir results/
    martian-robots --config configs/sample.yaml --workers 4
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config, load_mission_file
from .model.engine import MissionEngine
from .model.errors import MartianRobotsError
from .export.csv_writer import CSVWriter
from .export.visualizer import Visualizer
from .export.reporter import Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='martian-robots',
        description='Martian Robots grid simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    martian-robots --input mission.txt
    martian-robots --input - < mission.txt --quiet
    martian-robots --config configs/sample.yaml --snapshot --gif --out-dir results/
    martian-robots --config configs/sample.yaml --workers 4
        """
    )

    # Mission source
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--config', type=Path,
                        help='Path to YAML configuration file')
    source.add_argument('--input', type=Path,
                        help="Path to plain text mission file ('-' for stdin)")

    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')
    parser.add_argument('--workers', type=int, default=None,
                        help='Run robots concurrently on N threads')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Print robot results only')
    parser.add_argument('--verbose', action='store_true', default=False,
                        help='Enable debug logging')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] [%(name)s] %(message)s"
    )

    # Load mission
    source = args.config if args.config is not None else args.input
    try:
        if args.config is not None:
            config = load_config(args.config)
        else:
            config = load_mission_file(args.input)
    except FileNotFoundError:
        print(f"Error: Mission file not found: {source}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading mission: {e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.workers is not None:
        config.workers = args.workers
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    config.out_dir = args.out_dir

    try:
        engine = MissionEngine(config)
    except MartianRobotsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        print(f"Initializing mission...")
        print(f"  Grid: 0..{config.world.max_x} x 0..{config.world.max_y}")
        print(f"  Robots: {len(config.robots)}")
        if config.workers > 1:
            print(f"  Workers: {config.workers}")
        print()

    # Initialize exporters
    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(config.out_dir / 'robots.csv')
        csv_writer.open()

    visualizer = Visualizer(config.world.max_x, config.world.max_y)
    reporter = Reporter(str(source), config.world.max_x, config.world.max_y)

    # Main mission loop
    if config.workers > 1:
        results = engine.run_concurrent(config.workers)
        final_state = engine.snapshot()
        for result in results:
            reporter.add_result(result)
        if config.gif_enabled:
            visualizer.buffer_frame(final_state)
    else:
        final_state = engine.snapshot()
        while not engine.is_finished():
            final_state = engine.step()
            reporter.update(final_state)
            if config.gif_enabled:
                visualizer.buffer_frame(final_state)
        results = final_state.robots

    for result in results:
        print(result)
        if csv_writer:
            csv_writer.append(result)

    # Cleanup and final exports
    if csv_writer:
        csv_writer.close()
        if not config.quiet:
            print(f"\nCSV saved: {config.out_dir / 'robots.csv'}")

    if config.snapshot_enabled:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(final_state, snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'mission.gif'
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    # Print summary report
    if not config.quiet:
        report = reporter.generate_summary(
            final_state,
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 2 if any(r.error for r in results) else 0


if __name__ == '__main__':
    sys.exit(main())
