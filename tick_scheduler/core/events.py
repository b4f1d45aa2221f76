"""
Scheduling events derived from the processor occupant before and after each tick
"""

from enum import Enum
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from .process import ProcessSnapshot


class EventKind(Enum):
    """What happened to the processor occupant during a tick"""
    STARTED = "Started"
    RUNNING = "Running"
    FINISHED = "Finished"
    INTERRUPTED = "Interrupted"
    RESUMED = "Resumed"
    PROCESSOR_IDLE = "ProcessorIdle"


@dataclass(frozen=True)
class SchedulingEvent:
    """One immutable log entry"""
    system_time: int
    kind: EventKind
    start_of_tick: Optional[ProcessSnapshot] = None
    end_of_tick: Optional[ProcessSnapshot] = None

    @property
    def pid(self) -> Optional[int]:
        """Process the event is about, None for an idle tick"""
        snapshot = self.end_of_tick if self.end_of_tick is not None else self.start_of_tick
        return snapshot.pid if snapshot is not None else None

    def format(self) -> str:
        start = str(self.start_of_tick) if self.start_of_tick is not None else "None"
        end = str(self.end_of_tick) if self.end_of_tick is not None else "None"
        return f"{self.system_time:05d}: {start} -> {end}"

    def describe(self) -> str:
        """Short form used in the diagnostic trace, e.g. ``Started(P3)``"""
        if self.pid is None:
            return self.kind.value
        return f"{self.kind.value}(P{self.pid})"

    def __str__(self):
        return self.format()


def derive_events(system_time: int,
                  previous: Optional[int],
                  current: Optional[int],
                  before: Mapping[int, ProcessSnapshot],
                  after: Mapping[int, ProcessSnapshot]) -> List[SchedulingEvent]:
    """
    Classify the occupant change of one tick

    Args:
        system_time: tick being described
        previous: occupant before the tick
        current: occupant after the tick
        before: snapshots taken before the tick, by pid
        after: snapshots taken after the tick, by pid

    Returns:
        one event, or two when the occupant changed from one process to another
    """
    if previous is None:
        if current is None:
            return [SchedulingEvent(system_time, EventKind.PROCESSOR_IDLE)]
        return [SchedulingEvent(system_time, EventKind.STARTED, None, after[current])]

    if current == previous:
        return [SchedulingEvent(system_time, EventKind.RUNNING, before[previous], after[current])]

    # the outgoing process leaves the processor
    if after[previous].remaining_time > 0:
        outgoing = EventKind.INTERRUPTED
    else:
        outgoing = EventKind.FINISHED
    events = [SchedulingEvent(system_time, outgoing, before[previous], None)]

    if current is None:
        return events

    # the incoming process takes it over
    if outgoing == EventKind.INTERRUPTED and before[current].serviced_time > 0:
        incoming = EventKind.RESUMED
    else:
        incoming = EventKind.STARTED
    events.append(SchedulingEvent(system_time, incoming, None, after[current]))
    return events


def format_log(events: Iterable[SchedulingEvent]) -> str:
    """Render events one per line"""
    return "\n".join(event.format() for event in events)
