"""
Process Registry Module

Holds the fixed, ordered set of processes for one simulation run.
The registry is built once from the input and is then mutated in place
by the engine; it is never resized.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Iterator, List, Sequence

from .process import Process
from pysched.exceptions import InvalidInputError
from pysched.logger import get_logger


class ProcessRegistry:
    """
    Ordered registry of processes indexed 0..N-1.

    Example:
        >>> registry = ProcessRegistry.load([3, 2])
        >>> registry[1].arrival_time
        1
        >>> registry.all_completed()
        False
    """

    def __init__(self, processes: List[Process]):
        self._processes = processes

    @classmethod
    def load(cls, entries: Sequence[int]) -> 'ProcessRegistry':
        """
        Build a registry from burst times in arrival order.

        Args:
            entries: Burst time of each process, in input order

        Returns:
            A registry whose process ids and arrival times are the
            entry positions

        Raises:
            InvalidInputError: If the sequence is empty or a burst time is
                not a positive integer
        """
        logger = get_logger('registry')
        entries = list(entries)

        if not entries:
            logger.error("Rejected empty process list")
            raise InvalidInputError("Process list is empty")

        processes = []
        for index, burst_time in enumerate(entries):
            if isinstance(burst_time, bool) or not isinstance(burst_time, int):
                logger.error("Rejected non-integer burst time", pid=index,
                             context={'burst_time': burst_time})
                raise InvalidInputError(
                    f"Burst time of P{index} must be an integer",
                    index=index,
                    value=burst_time
                )
            if burst_time <= 0:
                logger.error("Rejected non-positive burst time", pid=index,
                             context={'burst_time': burst_time})
                raise InvalidInputError(
                    f"Burst time of P{index} must be positive",
                    index=index,
                    value=burst_time
                )
            processes.append(Process(id=index, burst_time=burst_time, arrival_time=index))

        logger.debug("Registry loaded", context={'processes': len(processes)})
        return cls(processes)

    def all_completed(self) -> bool:
        """True when every process has completed."""
        return all(proc.completed for proc in self._processes)

    def get(self, pid: int) -> Process:
        """Get a process by id."""
        if not 0 <= pid < len(self._processes):
            raise IndexError(f"No process with id {pid}")
        return self._processes[pid]

    def __getitem__(self, pid: int) -> Process:
        return self.get(pid)

    def __len__(self) -> int:
        return len(self._processes)

    def __iter__(self) -> Iterator[Process]:
        return iter(self._processes)
