"""
Process record and lifecycle states
"""

from enum import Enum
from dataclasses import dataclass
from typing import Iterable, List, Optional
from copy import deepcopy


class ProcessState(Enum):
    """Process lifecycle state"""
    NON_EXISTENT = "NonExistent"
    READY = "Ready"
    RUNNING = "Running"
    SUSPENDED = "Suspended"
    TERMINATED = "Terminated"


SCHEDULABLE_STATES = (ProcessState.READY, ProcessState.RUNNING, ProcessState.SUSPENDED)


@dataclass(frozen=True)
class ProcessSnapshot:
    """Read-only copy of a process, handed to policies and stored in events"""
    pid: int
    state: ProcessState
    start_time: int
    remaining_time: int
    serviced_time: int
    waiting_time: int
    priority: int

    def __str__(self):
        return f"{self.state.value}({self.pid})"


class Process:
    """
    Process control block

    Tracks the timing of one unit of work. The Processor is the only
    owner allowed to mutate it.
    """

    def __init__(self, pid: int, start_time: int, execution_time: int, priority: int = 0):
        """
        Args:
            pid: unique process ID
            start_time: tick at which the process arrives
            execution_time: total ticks of CPU work
            priority: lower value means higher priority
        """
        if pid < 0:
            raise ValueError(f"pid must be non-negative: {pid}")
        if start_time < 0:
            raise ValueError(f"start_time must be non-negative: {start_time}")
        if execution_time <= 0:
            raise ValueError(f"execution_time must be positive: {execution_time}")
        if priority < 0:
            raise ValueError(f"priority must be non-negative: {priority}")

        self.pid = pid
        self.start_time = start_time
        self.execution_time = execution_time
        self.priority = priority

        self.state = ProcessState.NON_EXISTENT
        self.remaining_time = execution_time
        self.serviced_time = 0
        self.waiting_time = 0  # since the last time the process ran

        # statistics
        self.total_waiting_time = 0
        self.first_run_time: Optional[int] = None
        self.finish_time: Optional[int] = None
        self.turnaround_time = 0
        self.response_time: Optional[int] = None

    def admit(self):
        """NonExistent -> Ready"""
        if self.state != ProcessState.NON_EXISTENT:
            raise ValueError(f"P{self.pid} cannot be admitted from {self.state.value}")
        self.state = ProcessState.READY

    def execute(self, time_units: int = 1) -> bool:
        """
        Run the process for the given number of ticks

        Args:
            time_units: ticks to execute

        Returns:
            True when no work remains
        """
        if self.state != ProcessState.RUNNING:
            raise ValueError(f"P{self.pid} is not running ({self.state.value})")
        if time_units > self.remaining_time:
            raise ValueError(f"P{self.pid} has only {self.remaining_time} ticks left")

        self.remaining_time -= time_units
        self.serviced_time += time_units
        self.waiting_time = 0
        return self.remaining_time == 0

    def wait(self):
        """One more tick spent eligible but not running"""
        self.waiting_time += 1
        self.total_waiting_time += 1

    def is_completed(self) -> bool:
        return self.state == ProcessState.TERMINATED

    def is_schedulable(self) -> bool:
        return self.state in SCHEDULABLE_STATES

    def snapshot(self) -> ProcessSnapshot:
        return ProcessSnapshot(
            pid=self.pid,
            state=self.state,
            start_time=self.start_time,
            remaining_time=self.remaining_time,
            serviced_time=self.serviced_time,
            waiting_time=self.waiting_time,
            priority=self.priority,
        )

    def __repr__(self):
        return f"P{self.pid}[{self.state.value}]"

    def __str__(self):
        return f"Process {self.pid}: State={self.state.value}, Priority={self.priority}, " \
               f"Remaining={self.remaining_time}, Serviced={self.serviced_time}"


def create_process_copy(process: Process) -> Process:
    """
    Deep copy of a process

    Every simulation mutates its processes in place, so each run needs its own.
    """
    return deepcopy(process)


def copy_processes(processes: Iterable[Process]) -> List[Process]:
    return [create_process_copy(p) for p in processes]
