"""Tests for process records and the simulation configuration."""

import pytest
from pydantic import ValidationError

from tick_scheduler.core.errors import UnsupportedPolicyError
from tick_scheduler.core.process import ProcessState
from tick_scheduler.core.processor import DEFAULT_MAX_TICKS
from tick_scheduler.schedulers import FCFSScheduler, SRTScheduler, available_policies
from tick_scheduler.utils.config import SimulationConfig
from tick_scheduler.utils.input_parser import (
    DEMO_PROCESSES,
    ProcessInput,
    create_process_objects,
    load_demo_processes,
)


class TestProcessRecords:
    """Literal records are validated before they become processes."""

    def test_records_become_processes_sorted_by_pid(self) -> None:
        processes = create_process_objects([
            {'pid': 3, 'start_time': 0, 'execution_time': 2},
            ProcessInput(pid=1, start_time=4, execution_time=1, priority=2),
        ])
        assert [p.pid for p in processes] == [1, 3]
        assert processes[0].priority == 2
        assert processes[1].priority == 0
        assert all(p.state is ProcessState.NON_EXISTENT for p in processes)

    @pytest.mark.parametrize("record", [
        {'pid': -1, 'start_time': 0, 'execution_time': 1},
        {'pid': 0, 'start_time': -2, 'execution_time': 1},
        {'pid': 0, 'start_time': 0, 'execution_time': 0},
        {'pid': 0, 'start_time': 0, 'execution_time': 1, 'priority': -1},
        {'pid': 0, 'start_time': 0},
    ])
    def test_invalid_records_rejected(self, record) -> None:
        with pytest.raises(ValidationError):
            create_process_objects([record])

    def test_duplicate_pids_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate pid"):
            create_process_objects([
                {'pid': 0, 'start_time': 0, 'execution_time': 1},
                {'pid': 0, 'start_time': 1, 'execution_time': 1},
            ])

    def test_demo_dataset(self) -> None:
        processes = load_demo_processes()
        assert len(processes) == len(DEMO_PROCESSES)
        assert [p.pid for p in processes] == [0, 1, 2, 3, 4]
        assert load_demo_processes()[0] is not processes[0]


class TestSimulationConfig:
    """Configuration defaults and validation."""

    def test_defaults(self) -> None:
        config = SimulationConfig()
        assert config.policies == ["fcfs", "sjf", "priority", "priority-preemptive", "srt"]
        assert config.max_ticks == DEFAULT_MAX_TICKS
        assert config.time_quantum is None
        assert config.verbose is False

    def test_names_are_normalized(self) -> None:
        config = SimulationConfig(policies=[" FCFS", "Srt "])
        assert config.policies == ["fcfs", "srt"]
        schedulers = config.build_schedulers()
        assert isinstance(schedulers[0], FCFSScheduler)
        assert isinstance(schedulers[1], SRTScheduler)

    def test_all_expands_to_every_policy(self) -> None:
        assert SimulationConfig(policies=["all"]).policies == SimulationConfig().policies

    @pytest.mark.parametrize("settings", [
        {'policies': []},
        {'max_ticks': 0},
        {'time_quantum': 0},
        {'time_quantum': -3},
    ])
    def test_invalid_settings(self, settings) -> None:
        with pytest.raises(ValidationError):
            SimulationConfig(**settings)

    def test_unsupported_policy_fails_when_building(self) -> None:
        config = SimulationConfig(policies=["fcfs", "round-robin"])
        with pytest.raises(UnsupportedPolicyError):
            config.build_schedulers()

    @pytest.mark.parametrize("names", [
        ["all", "round-robin"],
        ["mlfq", "all"],
        ["all", "fcsf"],
    ])
    def test_all_does_not_hide_a_bad_name(self, names) -> None:
        config = SimulationConfig(policies=names)
        assert config.policies[:5] == available_policies()
        with pytest.raises(UnsupportedPolicyError):
            config.build_schedulers()

    def test_all_mixed_with_known_names_keeps_one_of_each(self) -> None:
        config = SimulationConfig(policies=["srt", "all", "FCFS"])
        assert config.policies == ["srt", "fcfs", "sjf", "priority", "priority-preemptive"]
