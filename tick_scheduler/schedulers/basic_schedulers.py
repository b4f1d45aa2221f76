"""
Non-preemptive scheduling policies
- FCFS (First-Come, First-Served)
- SJF (Shortest Job First)
- Priority (Highest Priority First)

Once a process holds the processor it keeps it until it terminates.
"""

from tick_scheduler.core.process import ProcessSnapshot
from tick_scheduler.core.scheduler_base import BaseScheduler


class FCFSScheduler(BaseScheduler):
    """
    FCFS (First-Come, First-Served) scheduler
    Earliest arrival first
    """

    name = "FCFS"

    def selection_key(self, process: ProcessSnapshot) -> int:
        return process.start_time


class SJFScheduler(BaseScheduler):
    """
    SJF (Shortest Job First) scheduler
    Smallest remaining work first, decided only when the processor is free
    """

    name = "SJF"

    def selection_key(self, process: ProcessSnapshot) -> int:
        return process.remaining_time


class PriorityScheduler(BaseScheduler):
    """
    Priority scheduler (non-preemptive)
    Lowest priority value first
    """

    name = "Priority"

    def selection_key(self, process: ProcessSnapshot) -> int:
        return process.priority
