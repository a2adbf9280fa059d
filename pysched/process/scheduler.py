"""
Process Scheduler Module

Implements the scheduling policies used by the simulation engine:
- First-Come-First-Served (non-preemptive)
- Shortest-Job-First (preemptive, shortest remaining time)
- Round Robin with a fixed quantum

A policy only decides which process runs next. It never touches the
wait and turnaround counters; that is the accountant's job.

Author: YSNRFD
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Optional

from .registry import ProcessRegistry
from pysched.exceptions import InvalidConfigurationError
from pysched.logger import get_logger


class SchedulerAlgorithm(ABC):
    """
    Abstract base class for scheduling algorithms.
    """

    name: str = "scheduler"

    # False means every process is ready from tick 0, for selection and
    # for wait and turnaround accounting alike
    honors_arrival: bool = True

    def __init__(self):
        self._registry: Optional[ProcessRegistry] = None

    @property
    def display_name(self) -> str:
        """Header printed above the trace."""
        return self.name

    @property
    def registry(self) -> ProcessRegistry:
        if self._registry is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to a registry")
        return self._registry

    def attach(self, registry: ProcessRegistry) -> None:
        """Bind the policy to a registry and reset its cursor state."""
        self._registry = registry
        self.reset()

    def reset(self) -> None:
        """Reset per-run selection state."""
        pass

    @abstractmethod
    def select(self, current_time: int) -> Optional[int]:
        """Return the id of the process to run during the tick, if any."""
        pass

    def process_ran(self, pid: int) -> None:
        """Called after the selected process has been charged one tick."""
        pass


class FCFSScheduler(SchedulerAlgorithm):
    """
    First-Come-First-Served scheduling algorithm.

    Runs processes strictly in registry order, each to completion.
    Arrival times are not consulted: every process is treated as present
    from the first tick.
    """

    name = "fcfs"
    # Also read by the accountant: FCFS wait and turnaround count from tick 0
    honors_arrival = False

    def __init__(self):
        super().__init__()
        self._cursor = 0
        self._logger = get_logger('scheduler_fcfs')

    @property
    def display_name(self) -> str:
        return "First Come First Served"

    def reset(self) -> None:
        self._cursor = 0

    def select(self, current_time: int) -> Optional[int]:
        """Select the first incomplete process at or after the cursor."""
        registry = self.registry
        while self._cursor < len(registry) and registry[self._cursor].completed:
            self._cursor += 1
            if self._cursor < len(registry):
                self._logger.debug(
                    "Advanced to next process",
                    pid=self._cursor,
                    context={'time': current_time}
                )

        if self._cursor < len(registry):
            return self._cursor
        return None


class SJFScheduler(SchedulerAlgorithm):
    """
    Shortest-Job-First scheduling algorithm (preemptive).

    Every tick picks the arrived, incomplete process with the least
    remaining time. Ties go to the lowest process id. A running process
    is preempted as soon as another one is strictly shorter.
    """

    name = "sjf"

    def __init__(self):
        super().__init__()
        self._last_pid: Optional[int] = None
        self._logger = get_logger('scheduler_sjf')

    @property
    def display_name(self) -> str:
        return "Shortest Job First"

    def reset(self) -> None:
        self._last_pid = None

    def select(self, current_time: int) -> Optional[int]:
        """Select the shortest remaining job among arrived processes."""
        shortest: Optional[int] = None
        shortest_time = 0

        for proc in self.registry:
            if not proc.is_ready(current_time):
                continue
            # Strict comparison keeps the lowest id on ties
            if shortest is None or proc.remaining_time < shortest_time:
                shortest = proc.id
                shortest_time = proc.remaining_time

        if (shortest is not None and self._last_pid is not None
                and shortest != self._last_pid
                and not self.registry[self._last_pid].completed):
            self._logger.debug(
                "Preempted process",
                pid=self._last_pid,
                context={'time': current_time, 'next_pid': shortest}
            )
        self._last_pid = shortest
        return shortest


class RoundRobinScheduler(SchedulerAlgorithm):
    """
    Round Robin scheduling algorithm.

    A cursor walks the registry circularly. The process under the cursor
    runs for at most `quantum` consecutive ticks; the cursor then moves one
    slot forward. Completed and not-yet-arrived processes are skipped.
    """

    name = "round_robin"

    def __init__(self, quantum: int = 2):
        """
        Initialize the Round Robin scheduler.

        Args:
            quantum: Time slice in ticks

        Raises:
            InvalidConfigurationError: If the quantum is not a positive integer
        """
        super().__init__()
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
            raise InvalidConfigurationError(
                "Time quantum must be a positive integer",
                parameter='quantum',
                value=quantum
            )
        self.quantum = quantum
        self._cursor = 0
        self._time_in_quantum = 0
        self._logger = get_logger('scheduler_rr')

    @property
    def display_name(self) -> str:
        return f"Round Robin with Quantum {self.quantum}"

    @property
    def time_in_quantum(self) -> int:
        return self._time_in_quantum

    def reset(self) -> None:
        self._cursor = 0
        self._time_in_quantum = 0

    def _advance(self) -> None:
        self._cursor = (self._cursor + 1) % len(self.registry)
        self._time_in_quantum = 0

    def select(self, current_time: int) -> Optional[int]:
        """Move the cursor to the next ready process and select it."""
        registry = self.registry

        for _ in range(len(registry)):
            if registry[self._cursor].is_ready(current_time):
                return self._cursor
            self._advance()

        return None

    def process_ran(self, pid: int) -> None:
        """Charge the slice and rotate on completion or quantum expiry."""
        self._time_in_quantum += 1

        if self.registry[pid].completed:
            self._advance()
        elif self._time_in_quantum == self.quantum:
            self._logger.debug(
                "Time slice expired",
                pid=pid,
                context={'quantum': self.quantum}
            )
            self._advance()


def create_scheduler(algorithm: str = "fcfs", quantum: Optional[int] = None) -> SchedulerAlgorithm:
    """
    Factory function to create a scheduler.

    Args:
        algorithm: Scheduler type ('fcfs', 'sjf', 'round_robin' or 'rr')
        quantum: Time slice for Round Robin, ignored by the other policies

    Returns:
        Scheduler instance

    Raises:
        InvalidConfigurationError: If the algorithm is unknown or the
            Round Robin quantum is invalid
    """
    schedulers = {
        'fcfs': FCFSScheduler,
        'sjf': SJFScheduler,
        'round_robin': RoundRobinScheduler,
        'rr': RoundRobinScheduler,
    }

    scheduler_class = schedulers.get(algorithm)
    if scheduler_class is None:
        raise InvalidConfigurationError(
            f"Unknown scheduling algorithm: {algorithm}",
            parameter='algorithm',
            value=algorithm
        )

    if scheduler_class is RoundRobinScheduler:
        if quantum is None:
            raise InvalidConfigurationError(
                "Round Robin requires a time quantum",
                parameter='quantum',
                value=quantum
            )
        return RoundRobinScheduler(quantum=quantum)
    return scheduler_class()
