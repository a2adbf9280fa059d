"""
Clock & Accountant Module

Advances simulated time one tick at a time and keeps the wait and
turnaround counters of every process. This is the only code that
mutates those counters.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from pysched.process.registry import ProcessRegistry
from pysched.exceptions import InternalInvariantViolation
from pysched.logger import get_logger


class Accountant:
    """
    Simulation clock and per-process bookkeeping.

    Each tick:
        1. The selected process (if any) is charged one tick of work and
           completes when its remaining time reaches 0.
        2. Every process that had arrived and was still incomplete when the
           tick began accrues one tick of turnaround; all of them except the
           selected one also accrue one tick of wait.
        3. The clock advances.

    Args:
        registry: Processes to account for
        honors_arrival: When False every process counts as arrived from
            tick 0 (used with FCFS)

    Example:
        >>> accountant = Accountant(registry)
        >>> accountant.tick(0)
        >>> accountant.current_time
        1
    """

    def __init__(self, registry: ProcessRegistry, honors_arrival: bool = True):
        self._registry = registry
        self._honors_arrival = honors_arrival
        self._current_time = 0
        self._logger = get_logger('accountant')

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def honors_arrival(self) -> bool:
        return self._honors_arrival

    def tick(self, selected_id: Optional[int]) -> None:
        """
        Apply one tick.

        Args:
            selected_id: Process that runs during this tick, or None

        Raises:
            InternalInvariantViolation: If the selected process does not
                exist or has already completed
        """
        now = self._current_time

        # Processes that compete for this tick, taken before completion is applied
        active = [
            proc for proc in self._registry
            if proc.is_ready(now, self._honors_arrival)
        ]

        if selected_id is not None:
            if not 0 <= selected_id < len(self._registry):
                self._logger.error("Selected unknown process", pid=selected_id,
                                   context={'time': now})
                raise InternalInvariantViolation(
                    "Selected process does not exist",
                    current_time=now,
                    pid=selected_id
                )

            selected = self._registry[selected_id]
            if selected.completed:
                self._logger.error("Selected completed process", pid=selected_id,
                                   context={'time': now})
                raise InternalInvariantViolation(
                    "Selected process has already completed",
                    current_time=now,
                    pid=selected_id
                )

            selected.run_tick(now)
            if selected.completed:
                self._logger.debug(
                    "Process completed",
                    pid=selected_id,
                    context={'time': selected.completion_time}
                )

        for proc in active:
            if proc.id != selected_id:
                proc.wait_time += 1
            proc.turnaround_time += 1

        self._current_time += 1
