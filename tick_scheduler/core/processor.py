"""
Processor: the tick-driven simulation driver
"""

from typing import Dict, List, Optional, Tuple

from .process import Process, ProcessSnapshot, ProcessState, copy_processes
from .scheduler_base import BaseScheduler, ProcessorView, SchedulerStats
from .events import EventKind, SchedulingEvent, derive_events
from .errors import InvalidProcessSetError, PolicyViolationError, SimulationTimeoutError

# Tick limit guarding against policies that never finish the workload
DEFAULT_MAX_TICKS = 10000


class Processor:
    """
    Single processor simulation

    Owns a private copy of the process set and the virtual clock. Every
    tick it admits arrivals, asks the scheduling policy for the occupant,
    runs that occupant for one tick and ages everyone else.
    """

    def __init__(self, processes: List[Process], scheduler: BaseScheduler,
                 time_quantum: Optional[int] = None, max_ticks: int = DEFAULT_MAX_TICKS,
                 verbose: bool = False):
        """
        Args:
            processes: initial process set (copied, the originals are never touched)
            scheduler: scheduling policy
            time_quantum: minimum uninterrupted run length for quantum-aware policies
            max_ticks: tick limit before the run is declared stalled
            verbose: print the diagnostic trace when the run ends
        """
        if time_quantum is not None and time_quantum <= 0:
            raise InvalidProcessSetError(f"time_quantum must be positive: {time_quantum}")
        if max_ticks <= 0:
            raise InvalidProcessSetError(f"max_ticks must be positive: {max_ticks}")

        self.processes = copy_processes(processes)
        self.process_table: Dict[int, Process] = {}
        for process in self.processes:
            if process.pid in self.process_table:
                raise InvalidProcessSetError(f"duplicate pid: {process.pid}")
            self.process_table[process.pid] = process

        self.scheduler = scheduler
        self.name = scheduler.name
        self.time_quantum = time_quantum
        self.max_ticks = max_ticks
        self.verbose = verbose

        self.system_time = 0
        self.current: Optional[int] = None
        self.previous: Optional[int] = None
        self.terminated_processes: List[Process] = []

        self.events: List[SchedulingEvent] = []
        self.event_log: List[str] = []
        self.stats = SchedulerStats()

    def log_event(self, message: str, time: Optional[int] = None):
        """Append a line to the diagnostic trace"""
        if time is None:
            time = self.system_time
        self.event_log.append(f"[T={time:5d}] {message}")

    def snapshot(self) -> Dict[int, ProcessSnapshot]:
        """Snapshots of every process, by pid"""
        return {p.pid: p.snapshot() for p in self.processes}

    def occupant_snapshot(self) -> Optional[ProcessSnapshot]:
        if self.current is None:
            return None
        return self.process_table[self.current].snapshot()

    def handle_process_arrival(self):
        """NonExistent -> Ready for processes arriving this tick"""
        for process in self.processes:
            if process.state == ProcessState.NON_EXISTENT and process.start_time == self.system_time:
                process.admit()
                self.log_event(f"P{process.pid} arrived → Ready")

    def schedulable_processes(self) -> Tuple[ProcessSnapshot, ...]:
        return tuple(p.snapshot() for p in self.processes if p.is_schedulable())

    def validate_selection(self, selected: Optional[int]):
        """
        Reject selections the processor cannot honour

        Raises:
            PolicyViolationError: unknown pid, a process that has not arrived
                or already terminated, or a non-preemptive policy switching
                away from a running process
        """
        if selected is not None:
            process = self.process_table.get(selected)
            if process is None:
                raise PolicyViolationError(self.name, self.system_time,
                                           f"selected unknown pid {selected}")
            if not process.is_schedulable():
                raise PolicyViolationError(self.name, self.system_time,
                                           f"selected P{selected} in state {process.state.value}")

        if (selected != self.current and self.current is not None
                and not self.scheduler.preemptive):
            raise PolicyViolationError(self.name, self.system_time,
                                       f"non-preemptive policy switched away from running P{self.current}")

    def dispatch(self):
        """Ask the policy for the occupant of the coming tick and apply it"""
        view = ProcessorView(current=self.current, previous=self.previous,
                             system_time=self.system_time, time_quantum=self.time_quantum)
        selected = self.scheduler.select(self.schedulable_processes(), view)
        self.validate_selection(selected)

        if selected == self.current:
            return

        if self.current is not None:
            self.preempt(self.process_table[self.current])
        self.context_switch(selected)

    def preempt(self, process: Process):
        """Running -> Suspended"""
        process.state = ProcessState.SUSPENDED
        self.log_event(f"P{process.pid} preempted → Suspended")

    def context_switch(self, pid: Optional[int]):
        """
        Hand the processor to a new occupant

        Args:
            pid: the new occupant (None leaves the processor idle)
        """
        if self.previous is not None and pid is not None and self.previous != pid:
            self.stats.context_switches += 1
            self.log_event(f"Context Switch: P{self.previous} → P{pid}")

        self.current = pid
        if pid is None:
            return

        process = self.process_table[pid]
        process.state = ProcessState.RUNNING
        if process.first_run_time is None:
            process.first_run_time = self.system_time
            process.response_time = self.system_time - process.start_time
        self.log_event(f"P{pid} → Running")

    def execute_current(self) -> Optional[int]:
        """
        Run the occupant for one tick

        Returns:
            pid of the process that executed, None when idle
        """
        if self.current is None:
            self.stats.idle_time += 1
            return None

        process = self.process_table[self.current]
        finished = process.execute(1)
        self.stats.cpu_busy_time += 1

        if finished:
            process.finish_time = self.system_time + 1
            self.terminate_process(process)
        return process.pid

    def terminate_process(self, process: Process):
        """Running -> Terminated"""
        process.state = ProcessState.TERMINATED
        process.turnaround_time = process.finish_time - process.start_time
        self.terminated_processes.append(process)
        self.stats.record_process(process)
        self.log_event(f"P{process.pid} → Terminated (WT={process.total_waiting_time}, "
                       f"TT={process.turnaround_time})")

    def update_waiting_times(self, executed: Optional[int]):
        """Age every Ready or Suspended process that did not run this tick"""
        for process in self.processes:
            if process.pid == executed:
                continue
            if process.state in (ProcessState.READY, ProcessState.SUSPENDED):
                process.wait()

    def tick(self) -> Tuple[int, Optional[ProcessSnapshot]]:
        """
        Advance the simulation by one tick

        Returns:
            (new system time, snapshot of the occupant before the tick)
        """
        occupant = self.occupant_snapshot()
        self.previous = self.current

        # 0. a process that terminated last tick releases the processor
        if self.current is not None and self.process_table[self.current].is_completed():
            self.current = None

        # 1. arrivals
        self.handle_process_arrival()

        # 2. policy decision
        self.dispatch()

        # 3. execution
        executed = self.execute_current()

        # 4. waiting
        self.update_waiting_times(executed)

        self.system_time += 1
        return self.system_time, occupant

    def all_terminated(self) -> bool:
        return len(self.terminated_processes) >= len(self.processes)

    def is_simulation_complete(self) -> bool:
        """Every process terminated and the last one has left the processor"""
        return self.all_terminated() and self.current is None

    def stalled_processes(self) -> List[ProcessSnapshot]:
        return [p.snapshot() for p in self.processes if not p.is_completed()]

    def run(self) -> Dict:
        """
        Tick until every process has terminated

        Returns:
            results dictionary (see get_results)

        Raises:
            PolicyViolationError: the policy made an invalid selection
            SimulationTimeoutError: max_ticks elapsed with work outstanding
        """
        self.log_event(f"===== {self.name} Scheduling Started =====")

        while not self.is_simulation_complete():
            if self.system_time >= self.max_ticks and not self.all_terminated():
                self.log_event("ERROR: Simulation timeout")
                raise SimulationTimeoutError(self.max_ticks, self.stalled_processes())

            tick_time = self.system_time
            before = self.snapshot()
            self.tick()
            new_events = derive_events(tick_time, self.previous, self.current,
                                       before, self.snapshot())
            for event in new_events:
                if event.kind not in (EventKind.RUNNING, EventKind.PROCESSOR_IDLE):
                    self.log_event(event.describe(), time=tick_time)
            self.events.extend(new_events)

        self.log_event(f"===== {self.name} Scheduling Completed =====")

        if self.verbose:
            for log in self.event_log:
                print(log)

        return self.get_results()

    def get_results(self) -> Dict:
        """
        Returns:
            results dictionary (statistics, events, formatted log, trace, processes)
        """
        self.stats.total_simulation_time = self.system_time

        return {
            'algorithm': self.name,
            'statistics': self.stats.calculate_averages(),
            'events': list(self.events),
            'log': [event.format() for event in self.events],
            'event_log': list(self.event_log),
            'processes': self.processes
        }
