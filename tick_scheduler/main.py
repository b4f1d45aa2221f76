#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tick scheduler simulator - command-line driver

Runs the demonstration dataset through each selected policy and prints
the scheduling log of every run.
"""

import argparse
import sys
from typing import Dict, List, Optional

from pydantic import ValidationError

from tick_scheduler.core.errors import SchedulerError
from tick_scheduler.core.process import Process
from tick_scheduler.core.processor import Processor
from tick_scheduler.core.scheduler_base import BaseScheduler
from tick_scheduler.schedulers.registry import UNSUPPORTED_POLICIES, available_policies
from tick_scheduler.utils.config import SimulationConfig
from tick_scheduler.utils.input_parser import load_demo_processes


def print_banner(title: str):
    print("\n" + "="*80)
    print(title)
    print("="*80)


def run_single_policy(scheduler: BaseScheduler, processes: List[Process],
                      config: SimulationConfig) -> Dict:
    """
    Run one policy over its own copy of the process set

    Args:
        scheduler: scheduling policy
        processes: initial process set (left untouched)
        config: simulation settings

    Returns:
        results dictionary from Processor.run()
    """
    processor = Processor(processes, scheduler,
                          time_quantum=config.time_quantum,
                          max_ticks=config.max_ticks,
                          verbose=config.verbose)
    return processor.run()


def run_all_policies(processes: List[Process], config: SimulationConfig) -> List[Dict]:
    """
    Run every configured policy in turn

    All policies are instantiated before the first run, so an unsupported
    name fails before any simulation starts.
    """
    schedulers = config.build_schedulers()
    return [run_single_policy(scheduler, processes, config) for scheduler in schedulers]


def print_results(result: Dict):
    print_banner(f"Policy: {result['algorithm']}")
    for line in result['log']:
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick-scheduler",
        description="Discrete-time single-processor scheduling simulator")
    parser.add_argument(
        "-p", "--policy", action="append", dest="policies", metavar="NAME",
        help="policy to run, repeatable (choices: %s, all; not implemented: %s)"
             % (", ".join(available_policies()), ", ".join(UNSUPPORTED_POLICIES)))
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="abort a run that has not finished after this many ticks")
    parser.add_argument("--time-quantum", type=int, default=None,
                        help="time quantum handed to quantum-aware policies")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print the diagnostic trace of each run")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)

    settings = {'verbose': args.verbose}
    if args.policies:
        settings['policies'] = args.policies
    if args.max_ticks is not None:
        settings['max_ticks'] = args.max_ticks
    if args.time_quantum is not None:
        settings['time_quantum'] = args.time_quantum

    try:
        config = SimulationConfig(**settings)
        results = run_all_policies(load_demo_processes(), config)
    except ValidationError as e:
        print(f"[error] invalid configuration: {e}", file=sys.stderr)
        return 1
    except SchedulerError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    for result in results:
        print_results(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
