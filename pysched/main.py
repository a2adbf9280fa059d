#!/usr/bin/env python3
"""
PySched - CPU Scheduling Simulator

This is the command-line entry point for PySched.

Usage:
    pysched -f <input_file>             First Come First Served
    pysched -s <input_file>             Shortest Job First (preemptive)
    pysched -r <quantum> <input_file>   Round Robin

The input file holds one process per line, e.g. `P0,3`.

Author: YSNRFD
Version: 1.0.0
"""

import argparse
import sys
from typing import List, Optional

from pysched.core.config_loader import ConfigLoader, Config, get_config
from pysched.core.engine import SimulationEngine
from pysched.exceptions import PySchedError
from pysched.loader import load_process_file
from pysched.logger import Logger, LogLevel, get_logger
from pysched.process.registry import ProcessRegistry
from pysched.process.scheduler import create_scheduler
from pysched.reporter import ConsoleReporter


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog='pysched',
        description='Simulate CPU scheduling of a fixed set of processes.'
    )

    algorithm = parser.add_mutually_exclusive_group()
    algorithm.add_argument('-f', dest='algorithm', action='store_const', const='fcfs',
                           help='First Come First Served')
    algorithm.add_argument('-s', dest='algorithm', action='store_const', const='sjf',
                           help='Shortest Job First (preemptive)')
    algorithm.add_argument('-r', dest='quantum', type=int, metavar='QUANTUM',
                           help='Round Robin with the given time quantum')

    parser.add_argument('input_file', help='process list, one "P<id>,<burst>" per line')
    parser.add_argument('--config', help='JSON configuration file')
    parser.add_argument('--log-level', choices=[level.name for level in LogLevel],
                        help='override the configured log level')
    parser.add_argument('--timeline', action='store_true', default=None,
                        help='print the merged execution timeline')
    parser.add_argument('--no-trace', dest='show_trace', action='store_false', default=None,
                        help='do not print the per-tick trace')
    return parser


def _resolve_algorithm(args: argparse.Namespace, config: Config) -> tuple:
    """Pick the algorithm and quantum from flags, falling back to config."""
    if args.quantum is not None:
        return 'round_robin', args.quantum
    if args.algorithm is not None:
        return args.algorithm, None
    return config.scheduler.algorithm, config.scheduler.quantum


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for PySched.

    Sequence:
    1. Load configuration
    2. Initialize logging
    3. Build the scheduling policy (validates the quantum)
    4. Load the process list
    5. Run the simulation and print the report

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            config = ConfigLoader().load(args.config)
        else:
            config = get_config()

        level = args.log_level or config.logging.level
        Logger.initialize(
            level=LogLevel[level],
            log_file=config.logging.log_file,
            use_colors=config.logging.use_colors,
            console_output=config.logging.console_output
        )

        algorithm, quantum = _resolve_algorithm(args, config)
        policy = create_scheduler(algorithm, quantum=quantum)

        bursts = load_process_file(args.input_file)
        registry = ProcessRegistry.load(bursts)

        show_trace = config.report.show_trace if args.show_trace is None else args.show_trace
        show_timeline = config.report.show_timeline if args.timeline is None else args.timeline
        reporter = ConsoleReporter(
            sys.stdout,
            show_trace=show_trace,
            show_timeline=show_timeline,
            precision=config.report.precision
        )

        SimulationEngine(registry).run(policy, reporter)
    except PySchedError as e:
        get_logger('main').debug("Run aborted", context={'error': type(e).__name__})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
