"""
Policy names and their implementations
"""

from typing import Dict, List, Type

from tick_scheduler.core.errors import UnsupportedPolicyError
from tick_scheduler.core.scheduler_base import BaseScheduler
from .basic_schedulers import FCFSScheduler, SJFScheduler, PriorityScheduler
from .advanced_schedulers import PreemptivePriorityScheduler, SRTScheduler


POLICIES: Dict[str, Type[BaseScheduler]] = {
    'fcfs': FCFSScheduler,
    'sjf': SJFScheduler,
    'priority': PriorityScheduler,
    'priority-preemptive': PreemptivePriorityScheduler,
    'srt': SRTScheduler,
}

# Known policies without an implementation. Requesting one fails before any run starts.
UNSUPPORTED_POLICIES: Dict[str, str] = {
    'round-robin': 'Round Robin',
    'mlfq': 'Multi-Level Feedback Queue',
}


def available_policies() -> List[str]:
    return list(POLICIES)


def create_scheduler(name: str) -> BaseScheduler:
    """
    Instantiate a policy by name

    Args:
        name: one of POLICIES (case-insensitive)

    Raises:
        UnsupportedPolicyError: the name is unknown or not implemented
    """
    key = name.strip().lower()

    if key in UNSUPPORTED_POLICIES:
        raise UnsupportedPolicyError(name, f"{UNSUPPORTED_POLICIES[key]} is not implemented")
    if key not in POLICIES:
        raise UnsupportedPolicyError(name)

    return POLICIES[key]()
