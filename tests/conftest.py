"""Shared fixtures for the simulator tests."""

from typing import List, Tuple

import pytest

from helpers import make_processes
from tick_scheduler.core.processor import Processor
from tick_scheduler.schedulers.registry import create_scheduler
from tick_scheduler.utils.input_parser import DEMO_PROCESSES


@pytest.fixture
def run_policy():
    """Run a named policy over the given records and return the finished Processor."""

    def _run(name: str, *records: Tuple[int, int, int, int], **kwargs) -> Processor:
        processor = Processor(make_processes(*records), create_scheduler(name), **kwargs)
        processor.run()
        return processor

    return _run


@pytest.fixture
def demo_records() -> List[Tuple[int, int, int, int]]:
    return list(DEMO_PROCESSES)
