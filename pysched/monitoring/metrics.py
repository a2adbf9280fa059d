"""
Simulation Metrics Module

Records produced by a simulation run:
- Per-tick trace records
- Per-process summaries
- Aggregate statistics (averages, context switches, timeline)

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple

from pysched.process.process import Process


@dataclass(frozen=True)
class TraceRecord:
    """
    One tick of the execution trace.

    The counters are those of the selected process at the moment it was
    picked, before the tick was charged.
    """
    time: int
    process_id: Optional[int]
    remaining_time: Optional[int] = None
    wait_time: Optional[int] = None
    turnaround_time: Optional[int] = None

    @classmethod
    def snapshot(cls, time: int, proc: Optional[Process]) -> 'TraceRecord':
        if proc is None:
            return cls(time=time, process_id=None)
        return cls(
            time=time,
            process_id=proc.id,
            remaining_time=proc.remaining_time,
            wait_time=proc.wait_time,
            turnaround_time=proc.turnaround_time,
        )


@dataclass(frozen=True)
class ProcessSummary:
    """Final statistics of a single process."""
    id: int
    arrival_time: int
    burst_time: int
    wait_time: int
    turnaround_time: int
    completion_time: Optional[int]

    @classmethod
    def from_process(cls, proc: Process) -> 'ProcessSummary':
        return cls(
            id=proc.id,
            arrival_time=proc.arrival_time,
            burst_time=proc.burst_time,
            wait_time=proc.wait_time,
            turnaround_time=proc.turnaround_time,
            completion_time=proc.completion_time,
        )


@dataclass
class SimulationResult:
    """
    Outcome of a complete simulation run.

    Example:
        >>> result = engine.run(FCFSScheduler())
        >>> result.average_wait_time
        1.5
    """
    algorithm: str
    trace: List[TraceRecord] = field(default_factory=list)
    processes: List[ProcessSummary] = field(default_factory=list)
    total_ticks: int = 0

    @property
    def average_wait_time(self) -> float:
        if not self.processes:
            return 0.0
        return sum(p.wait_time for p in self.processes) / len(self.processes)

    @property
    def average_turnaround_time(self) -> float:
        if not self.processes:
            return 0.0
        return sum(p.turnaround_time for p in self.processes) / len(self.processes)

    @property
    def selections(self) -> List[Optional[int]]:
        """Process id chosen on each tick."""
        return [record.process_id for record in self.trace]

    @property
    def context_switches(self) -> int:
        """Number of times the running process changed between ticks."""
        switches = 0
        previous = None
        for pid in self.selections:
            if previous is not None and pid is not None and pid != previous:
                switches += 1
            if pid is not None:
                previous = pid
        return switches

    def timeline(self) -> List[Tuple[int, int, int]]:
        """Merge consecutive ticks of the same process into (pid, start, end)."""
        segments: List[Tuple[int, int, int]] = []
        for record in self.trace:
            if record.process_id is None:
                continue
            if segments and segments[-1][0] == record.process_id and segments[-1][2] == record.time:
                pid, start, _ = segments[-1]
                segments[-1] = (pid, start, record.time + 1)
            else:
                segments.append((record.process_id, record.time, record.time + 1))
        return segments

    def get_process(self, pid: int) -> ProcessSummary:
        for summary in self.processes:
            if summary.id == pid:
                return summary
        raise KeyError(pid)
