"""
Core modules for the tick scheduler simulator
"""

from .process import Process, ProcessSnapshot, ProcessState, create_process_copy, copy_processes
from .scheduler_base import BaseScheduler, ProcessorView, SchedulerStats
from .events import EventKind, SchedulingEvent, derive_events, format_log
from .errors import (SchedulerError, InvalidProcessSetError, UnsupportedPolicyError,
                     PolicyViolationError, SimulationTimeoutError)
from .processor import Processor, DEFAULT_MAX_TICKS

__all__ = [
    'Process',
    'ProcessSnapshot',
    'ProcessState',
    'create_process_copy',
    'copy_processes',
    'BaseScheduler',
    'ProcessorView',
    'SchedulerStats',
    'EventKind',
    'SchedulingEvent',
    'derive_events',
    'format_log',
    'SchedulerError',
    'InvalidProcessSetError',
    'UnsupportedPolicyError',
    'PolicyViolationError',
    'SimulationTimeoutError',
    'Processor',
    'DEFAULT_MAX_TICKS'
]
