"""
Tick scheduler: discrete-time single-processor scheduling simulator
"""

from .core import Process, ProcessState, Processor, SchedulingEvent, EventKind, format_log
from .schedulers import create_scheduler, available_policies

__version__ = "1.0.0"

__all__ = [
    'Process',
    'ProcessState',
    'Processor',
    'SchedulingEvent',
    'EventKind',
    'format_log',
    'create_scheduler',
    'available_policies'
]
