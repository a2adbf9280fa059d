"""
Reporter Module

Consumers of a simulation run. The engine hands every trace record and
the final result to a reporter; reporters never influence the run.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from pysched.monitoring.metrics import TraceRecord, SimulationResult
from pysched.process.scheduler import SchedulerAlgorithm


class Reporter(ABC):
    """
    Abstract base class for run reporters.
    """

    def on_start(self, policy: SchedulerAlgorithm) -> None:
        """Called once before the first tick."""
        pass

    @abstractmethod
    def on_tick(self, record: TraceRecord) -> None:
        """Called after every tick."""
        pass

    @abstractmethod
    def on_finish(self, result: SimulationResult) -> None:
        """Called once with the final result."""
        pass


class ConsoleReporter(Reporter):
    """
    Prints the trace and final statistics in the classic text format.

    Example output:
        First Come First Served
        T0 : P0 - Burst left  3, Wait time 0, Turnaround time 0
        ...
        P0
            Waiting time:           0
            Turnaround time:        3
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        show_trace: bool = True,
        show_timeline: bool = False,
        precision: int = 1
    ):
        self._stream = stream or sys.stdout
        self.show_trace = show_trace
        self.show_timeline = show_timeline
        self.precision = precision

    def _write(self, text: str = "") -> None:
        self._stream.write(text + "\n")

    def on_start(self, policy: SchedulerAlgorithm) -> None:
        self._write(policy.display_name)

    def on_tick(self, record: TraceRecord) -> None:
        if not self.show_trace:
            return
        if record.process_id is None:
            self._write(f"T{record.time} : idle")
            return
        self._write(
            f"T{record.time} : P{record.process_id} - "
            f"Burst left {record.remaining_time:2d}, "
            f"Wait time {record.wait_time}, "
            f"Turnaround time {record.turnaround_time}"
        )

    def on_finish(self, result: SimulationResult) -> None:
        for summary in result.processes:
            self._write()
            self._write(f"P{summary.id}")
            self._write(f"\tWaiting time:\t\t{summary.wait_time:3d}")
            self._write(f"\tTurnaround time:\t{summary.turnaround_time:3d}")

        p = self.precision
        self._write()
        self._write(f"Total average waiting time:\t{result.average_wait_time:.{p}f}")
        self._write(f"Total average turnaround time:\t{result.average_turnaround_time:.{p}f}")

        if self.show_timeline:
            self._write()
            self._write("Execution Timeline:")
            for pid, start, end in result.timeline():
                self._write(f"P{pid} runs from {start} to {end}")
            self._write(f"Context switches: {result.context_switches}")


class RecordingReporter(Reporter):
    """Keeps everything it receives in memory."""

    def __init__(self):
        self.policy_name: Optional[str] = None
        self.records: List[TraceRecord] = []
        self.result: Optional[SimulationResult] = None

    def on_start(self, policy: SchedulerAlgorithm) -> None:
        self.policy_name = policy.display_name

    def on_tick(self, record: TraceRecord) -> None:
        self.records.append(record)

    def on_finish(self, result: SimulationResult) -> None:
        self.result = result
