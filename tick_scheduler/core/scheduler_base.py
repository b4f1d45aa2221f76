"""
Scheduling policy contract and run statistics
"""

from typing import Dict, Optional, Sequence, Tuple
from dataclasses import dataclass

from .process import Process, ProcessSnapshot


@dataclass(frozen=True)
class ProcessorView:
    """Processor state visible to a policy during one selection"""
    current: Optional[int]
    previous: Optional[int]
    system_time: int
    time_quantum: Optional[int] = None


@dataclass
class SchedulerStats:
    """Counters collected by the Processor during one run"""
    completed: int = 0
    waiting_sum: int = 0
    turnaround_sum: int = 0
    response_sum: int = 0
    context_switches: int = 0
    cpu_busy_time: int = 0
    idle_time: int = 0
    total_simulation_time: int = 0

    def record_process(self, process: Process):
        """Fold one terminated process into the sums"""
        self.completed += 1
        self.waiting_sum += process.total_waiting_time
        self.turnaround_sum += process.turnaround_time
        self.response_sum += process.response_time or 0

    def _mean(self, total: int) -> float:
        return total / self.completed if self.completed else 0

    def calculate_averages(self) -> Dict:
        """Per-process means plus processor occupancy for the whole run"""
        ticks = self.total_simulation_time
        return {
            'processes': self.completed,
            'avg_waiting_time': self._mean(self.waiting_sum),
            'avg_turnaround_time': self._mean(self.turnaround_sum),
            'avg_response_time': self._mean(self.response_sum),
            'cpu_busy_time': self.cpu_busy_time,
            'idle_time': self.idle_time,
            'total_ticks': ticks,
            'cpu_utilization': self.cpu_busy_time / ticks * 100 if ticks else 0,
            'context_switches': self.context_switches,
        }


class BaseScheduler:
    """
    Base scheduling policy

    A policy is a pure decision: given the schedulable processes and the
    processor state it names the process that occupies the processor for
    the coming tick. It never touches timing fields or process states;
    the Processor applies the decision.

    Subclasses set ``name`` and ``preemptive`` and implement
    ``selection_key``. Candidates are ordered by ``(selection_key, pid)``
    so equal keys always resolve to the lowest pid.
    """

    name = "Base Scheduler"
    preemptive = False

    def selection_key(self, process: ProcessSnapshot):
        """Ordering key, smallest wins (implemented by subclasses)"""
        raise NotImplementedError("Subclasses must implement selection_key()")

    def select_next_process(self, processes: Sequence[ProcessSnapshot]) -> Optional[ProcessSnapshot]:
        """Best candidate by (key, pid), or None when there are no candidates"""
        if not processes:
            return None
        return min(processes, key=lambda p: (self.selection_key(p), p.pid))

    def select(self, processes: Tuple[ProcessSnapshot, ...], state: ProcessorView) -> Optional[int]:
        """
        Choose the occupant for the coming tick

        Args:
            processes: snapshots of the schedulable processes
            state: processor state

        Returns:
            pid of the selected process, or None to leave the processor idle
        """
        if not self.preemptive and state.current is not None:
            return state.current

        chosen = self.select_next_process(processes)
        return chosen.pid if chosen is not None else None

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, preemptive={self.preemptive})"
