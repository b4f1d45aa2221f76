"""
Simulation configuration
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from tick_scheduler.core.processor import DEFAULT_MAX_TICKS
from tick_scheduler.core.scheduler_base import BaseScheduler
from tick_scheduler.schedulers.registry import available_policies, create_scheduler


class SimulationConfig(BaseModel):
    """Settings shared by every run of a batch"""
    policies: List[str] = Field(default_factory=available_policies)
    time_quantum: Optional[int] = Field(default=None, gt=0)
    max_ticks: int = Field(default=DEFAULT_MAX_TICKS, gt=0)
    verbose: bool = False

    @field_validator('policies')
    @classmethod
    def normalize_policies(cls, value: List[str]) -> List[str]:
        names = [name.strip().lower() for name in value]
        if not names:
            raise ValueError("at least one policy is required")
        # 'all' expands in place; other names are kept so build_schedulers can reject them
        expanded: List[str] = []
        for name in names:
            for policy in (available_policies() if name == 'all' else [name]):
                if policy not in expanded:
                    expanded.append(policy)
        return expanded

    def build_schedulers(self) -> List[BaseScheduler]:
        """
        Instantiate every configured policy

        Raises:
            UnsupportedPolicyError: a name is unknown or not implemented
        """
        return [create_scheduler(name) for name in self.policies]
