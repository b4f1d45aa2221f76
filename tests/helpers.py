"""Builders shared by the test modules."""

from typing import List, Optional, Tuple

from tick_scheduler.core.process import Process, ProcessSnapshot, ProcessState


def make_processes(*records: Tuple[int, int, int, int]) -> List[Process]:
    """Build processes from (pid, start_time, execution_time, priority) tuples."""
    return [Process(pid, start, length, priority) for pid, start, length, priority in records]


def make_snapshot(pid: int, state: ProcessState, remaining: int, serviced: int,
                  waiting: int = 0, start: int = 0, priority: int = 0) -> ProcessSnapshot:
    return ProcessSnapshot(pid=pid, state=state, start_time=start, remaining_time=remaining,
                           serviced_time=serviced, waiting_time=waiting, priority=priority)


def kinds(events) -> List[Tuple[int, str, Optional[int]]]:
    """(tick, kind, pid) triples, handy for comparing whole logs."""
    return [(e.system_time, e.kind.value, e.pid) for e in events]
