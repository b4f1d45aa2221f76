"""
Simulation errors
"""

from typing import Iterable, Tuple

from .process import ProcessSnapshot


class SchedulerError(Exception):
    """Base class for every simulation failure"""


class UnsupportedPolicyError(SchedulerError):
    """A policy name that is unknown or has no implementation"""

    def __init__(self, name: str, reason: str = "unknown scheduling policy"):
        super().__init__(f"{reason}: {name!r}")
        self.name = name


class PolicyViolationError(SchedulerError):
    """A policy made a selection the processor cannot honour"""

    def __init__(self, policy: str, system_time: int, message: str):
        super().__init__(f"[T={system_time}] {policy}: {message}")
        self.policy = policy
        self.system_time = system_time


class SimulationTimeoutError(SchedulerError):
    """The tick limit was reached before every process terminated"""

    def __init__(self, max_ticks: int, stalled: Iterable[ProcessSnapshot]):
        self.max_ticks = max_ticks
        self.stalled: Tuple[ProcessSnapshot, ...] = tuple(stalled)
        summary = ", ".join(
            f"{s}(remaining={s.remaining_time})" for s in self.stalled
        ) or "none"
        super().__init__(f"simulation exceeded {max_ticks} ticks; stalled processes: {summary}")


class InvalidProcessSetError(SchedulerError, ValueError):
    """Processor arguments that cannot describe a run (duplicate pids, bad limits)"""
