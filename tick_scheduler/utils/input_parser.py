"""
Process records and the demonstration dataset
"""

from typing import Any, Iterable, List, Mapping, Union

from pydantic import BaseModel, Field

from tick_scheduler.core.process import Process


class ProcessInput(BaseModel):
    """One literal process record"""
    pid: int = Field(ge=0)
    start_time: int = Field(ge=0)
    execution_time: int = Field(gt=0)
    priority: int = Field(default=0, ge=0)


# (pid, start_time, execution_time, priority)
DEMO_PROCESSES = [
    (0, 1, 2, 2),
    (1, 3, 3, 3),
    (2, 3, 1, 5),
    (3, 0, 4, 1),
    (4, 2, 2, 1),
]


def create_process_objects(records: Iterable[Union[ProcessInput, Mapping[str, Any]]]) -> List[Process]:
    """
    Validate records and build Process objects

    Args:
        records: ProcessInput instances or mappings with the same fields

    Returns:
        processes sorted by pid

    Raises:
        pydantic.ValidationError: a record is malformed
        ValueError: two records share a pid
    """
    inputs = [ProcessInput.model_validate(r) for r in records]

    seen = set()
    for p in inputs:
        if p.pid in seen:
            raise ValueError(f"duplicate pid: {p.pid}")
        seen.add(p.pid)

    processes = [
        Process(
            pid=p.pid,
            start_time=p.start_time,
            execution_time=p.execution_time,
            priority=p.priority
        )
        for p in inputs
    ]
    return sorted(processes, key=lambda p: p.pid)


def load_demo_processes() -> List[Process]:
    """Fresh Process objects for the demonstration dataset"""
    return create_process_objects(
        {'pid': pid, 'start_time': start, 'execution_time': length, 'priority': priority}
        for pid, start, length, priority in DEMO_PROCESSES
    )
