"""
Preemptive scheduling policies
- Priority (Highest Priority First, preemptive)
- SRT (Shortest Remaining Time)

These reconsider the whole schedulable set every tick, the running
process included, and may take the processor away from it.
"""

from tick_scheduler.core.process import ProcessSnapshot
from tick_scheduler.core.scheduler_base import BaseScheduler


class PreemptivePriorityScheduler(BaseScheduler):
    """
    Priority scheduler (preemptive)
    A newly arrived process with a lower priority value takes the processor
    the tick it arrives.
    """

    name = "Priority (Preemptive)"
    preemptive = True

    def selection_key(self, process: ProcessSnapshot) -> int:
        return process.priority


class SRTScheduler(BaseScheduler):
    """
    SRT (Shortest Remaining Time) scheduler
    Preemptive SJF: the smallest remaining work runs every tick
    """

    name = "SRT"
    preemptive = True

    def selection_key(self, process: ProcessSnapshot) -> int:
        return process.remaining_time
