#!/usr/bin/env python3

import sys
import argparse
import logging
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from rangetree.core import RangeAggregateTree
from rangetree.demo import StepThroughDriver, build_operations, default_operations
from rangetree.utils import DemoConfig, OperationRecorder, compute_layout, setup_logger
from rangetree.utils.visualization import save_frame


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Step through range sum tree operations and render each step')
    parser.add_argument('--config', type=str, default=str(project_root / 'config' / 'demo.yaml'),
                        help='Path to YAML config file')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Override output directory from config')
    parser.add_argument('--no-frames', action='store_true',
                        help='Skip rendering image frames')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_args(argv)


def run_demo(config, save_frames=True, level=logging.INFO):
    """Run the operation script and write frames plus the operation log"""
    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    logger = setup_logger('rangetree', output_dir / 'demo.log', level=level)

    tree = RangeAggregateTree(config.data)
    positions = compute_layout(tree, **config.layout_kwargs())
    if config.operations is None:
        operations = default_operations()
    else:
        operations = build_operations(config.operations)

    logger.info(f"Running {len(operations)} operations on {config.data}")

    recorder = OperationRecorder()
    driver = StepThroughDriver(tree, operations, recorder=recorder)

    for step in driver.run_all():
        if save_frames:
            frame = save_frame(
                tree,
                output_dir / f'step_{step:02d}.png',
                positions=positions,
                node_radius=config.node_radius,
                canvas=config.canvas,
                figsize=config.figsize,
                dpi=config.dpi,
                title=f"Operation {step}: {driver.current_operation.name}",
                subtitle=driver.last_result
            )
            logger.debug(f"Saved frame {frame}")

    csv_path = recorder.export_csv(str(output_dir))
    logger.info(f"Final leaves: {tree.get_leaves()}")
    logger.info(f"Saved operation log to {csv_path}")
    return recorder


def main(argv=None):
    args = parse_args(argv)

    config = DemoConfig.from_file(args.config)
    if args.output_dir:
        config.output_dir = Path(args.output_dir)

    recorder = run_demo(
        config,
        save_frames=config.save_frames and not args.no_frames,
        level=getattr(logging, args.log_level)
    )

    print("Demo completed. Results saved in:", config.output_dir)
    return recorder


if __name__ == "__main__":
    main()
