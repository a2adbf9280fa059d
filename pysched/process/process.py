"""
Process Module

The simulated process: identity, CPU demand and the run-time counters
maintained by the accountant.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Process:
    """
    A simulated process.

    Attributes:
        id: Position in the input, starting at 0
        burst_time: Total ticks of CPU work required
        arrival_time: Tick at which the process becomes eligible (equal to id)
        remaining_time: Ticks of work still to do
        wait_time: Ticks spent ready but not running
        turnaround_time: Ticks spent between arrival and completion
        completed: Set once remaining_time reaches 0
        completion_time: Tick boundary at which the process completed

    Example:
        >>> proc = Process(id=0, burst_time=3)
        >>> proc.remaining_time
        3
    """
    id: int
    burst_time: int
    arrival_time: int = 0
    remaining_time: int = field(default=0, init=False)
    wait_time: int = 0
    turnaround_time: int = 0
    completed: bool = False
    completion_time: Optional[int] = None

    def __post_init__(self) -> None:
        self.remaining_time = self.burst_time

    def has_arrived(self, current_time: int) -> bool:
        return self.arrival_time <= current_time

    def is_ready(self, current_time: int, honors_arrival: bool = True) -> bool:
        """
        Whether the process may run during the given tick.

        Args:
            current_time: The tick being scheduled
            honors_arrival: False for policies that treat every process as
                present from tick 0
        """
        if self.completed:
            return False
        return not honors_arrival or self.has_arrived(current_time)

    def run_tick(self, current_time: int) -> None:
        """Consume one tick of CPU work."""
        self.remaining_time -= 1
        if self.remaining_time == 0:
            self.completed = True
            self.completion_time = current_time + 1

    def __repr__(self) -> str:
        return (
            f"Process(id={self.id}, burst={self.burst_time}, "
            f"remaining={self.remaining_time}, completed={self.completed})"
        )
