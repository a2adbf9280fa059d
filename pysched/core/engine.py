"""
PySched Simulation Engine

The driver loop shared by every scheduling policy:
- Owns the process registry for the duration of a run
- Asks the policy for a selection every tick
- Lets the accountant charge the tick
- Emits trace records to a reporter
- Collects the final statistics

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from pysched.core.accountant import Accountant
from pysched.exceptions import EngineStateError, InternalInvariantViolation
from pysched.logger import get_logger
from pysched.monitoring.metrics import TraceRecord, ProcessSummary, SimulationResult
from pysched.process.registry import ProcessRegistry
from pysched.process.scheduler import SchedulerAlgorithm

if TYPE_CHECKING:
    from pysched.reporter import Reporter


class EngineState(Enum):
    """Engine lifecycle state."""
    IDLE = auto()
    RUNNING = auto()
    DONE = auto()


class SimulationEngine:
    """
    Tick-driven CPU scheduling simulator.

    State transitions:
        IDLE -> RUNNING: start() or the first tick of run()
        RUNNING -> DONE: every process has completed

    An engine is single-use: the registry is consumed in place, so a
    second run needs a freshly loaded registry and a new engine.

    Example:
        >>> engine = SimulationEngine(ProcessRegistry.load([3, 2]))
        >>> result = engine.run(FCFSScheduler())
        >>> result.total_ticks
        5
    """

    def __init__(self, registry: ProcessRegistry):
        self._registry = registry
        self._state = EngineState.IDLE
        self._policy: Optional[SchedulerAlgorithm] = None
        self._accountant: Optional[Accountant] = None
        self._result: Optional[SimulationResult] = None
        self._logger = get_logger('engine')

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def registry(self) -> ProcessRegistry:
        return self._registry

    @property
    def current_time(self) -> int:
        if self._accountant is None:
            return 0
        return self._accountant.current_time

    @property
    def result(self) -> Optional[SimulationResult]:
        """The final result, available once the engine is DONE."""
        return self._result

    def start(self, policy: SchedulerAlgorithm) -> None:
        """
        Prepare a run with the given policy.

        Raises:
            EngineStateError: If the engine has already been started
        """
        if self._state is not EngineState.IDLE:
            raise EngineStateError(
                "Simulation engine can only be started once",
                state=self._state.name
            )

        policy.attach(self._registry)
        self._policy = policy
        self._accountant = Accountant(self._registry, honors_arrival=policy.honors_arrival)
        self._result = SimulationResult(algorithm=policy.display_name)
        self._state = EngineState.RUNNING

        self._logger.info(
            "Simulation started",
            context={'algorithm': policy.name, 'processes': len(self._registry)}
        )

        # Nothing to schedule
        if self._registry.all_completed():
            self._finish()

    def step(self) -> TraceRecord:
        """
        Run a single tick.

        Returns:
            The trace record of the tick

        Raises:
            EngineStateError: If the engine is not running
            InternalInvariantViolation: If the policy finds no process while
                some are still incomplete
        """
        if self._state is not EngineState.RUNNING:
            raise EngineStateError(
                "Simulation engine is not running",
                state=self._state.name
            )

        now = self._accountant.current_time
        selected = self._policy.select(now)

        if selected is None and not self._registry.all_completed():
            self._logger.critical(
                "Policy selected no process while work remains",
                context={'time': now, 'algorithm': self._policy.name}
            )
            raise InternalInvariantViolation(
                "No eligible process found while processes remain incomplete",
                current_time=now
            )

        proc = self._registry[selected] if selected is not None else None
        record = TraceRecord.snapshot(now, proc)

        self._accountant.tick(selected)
        if selected is not None:
            self._policy.process_ran(selected)

        self._result.trace.append(record)
        self._logger.debug(
            "Tick",
            pid=selected,
            context={'time': now, 'remaining': record.remaining_time}
        )

        if self._registry.all_completed():
            self._finish()

        return record

    def run(
        self,
        policy: SchedulerAlgorithm,
        reporter: Optional['Reporter'] = None
    ) -> SimulationResult:
        """
        Run the simulation to completion.

        Args:
            policy: Scheduling policy deciding each tick
            reporter: Optional consumer of trace records and the final result

        Returns:
            The final simulation result
        """
        self.start(policy)

        if reporter is not None:
            reporter.on_start(policy)

        while self._state is EngineState.RUNNING:
            record = self.step()
            if reporter is not None:
                reporter.on_tick(record)

        if reporter is not None:
            reporter.on_finish(self._result)

        return self._result

    def _finish(self) -> None:
        """Collect the final statistics and move to DONE."""
        self._result.processes = [
            ProcessSummary.from_process(proc) for proc in self._registry
        ]
        self._result.total_ticks = self._accountant.current_time
        self._state = EngineState.DONE

        self._logger.info(
            "Simulation complete",
            context={
                'ticks': self._result.total_ticks,
                'avg_wait': f"{self._result.average_wait_time:.2f}",
                'avg_turnaround': f"{self._result.average_turnaround_time:.2f}",
            }
        )


def simulate(
    bursts,
    policy: SchedulerAlgorithm,
    reporter: Optional['Reporter'] = None
) -> SimulationResult:
    """
    Load a registry from burst times and run it to completion.

    Args:
        bursts: Burst time of each process, in arrival order
        policy: Scheduling policy
        reporter: Optional reporter

    Returns:
        The final simulation result
    """
    engine = SimulationEngine(ProcessRegistry.load(bursts))
    return engine.run(policy, reporter)
