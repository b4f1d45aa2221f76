"""
CPU Scheduling Policies
"""

from .basic_schedulers import FCFSScheduler, SJFScheduler, PriorityScheduler
from .advanced_schedulers import PreemptivePriorityScheduler, SRTScheduler
from .registry import POLICIES, UNSUPPORTED_POLICIES, available_policies, create_scheduler

__all__ = [
    'FCFSScheduler',
    'SJFScheduler',
    'PriorityScheduler',
    'PreemptivePriorityScheduler',
    'SRTScheduler',
    'POLICIES',
    'UNSUPPORTED_POLICIES',
    'available_policies',
    'create_scheduler'
]
