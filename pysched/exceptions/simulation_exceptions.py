"""
Simulation Exceptions

Exceptions raised by the simulation engine while a run is in progress.
These indicate programming errors rather than bad input and are never
retried: the simulation is deterministic and would fail the same way.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .base import PySchedError


class SimulationException(PySchedError):
    """Base exception for engine errors."""

    kind = "SimulationError"

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or 3000,
            context=context
        )


class InternalInvariantViolation(SimulationException):
    """
    The engine reached a state that should be unreachable.

    The typical case is a policy returning no process while the registry
    still holds incomplete processes. Since every process arrives no
    later than its index, this cannot happen with a well-formed policy.

    Example:
        >>> raise InternalInvariantViolation("No eligible process", current_time=4)
    """

    kind = "InternalInvariantViolation"

    def __init__(
        self,
        message: str,
        current_time: Optional[int] = None,
        pid: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if current_time is not None:
            ctx["time"] = current_time
        if pid is not None:
            ctx["pid"] = pid
        super().__init__(
            message=message,
            error_code=3001,
            context=ctx
        )
        self.current_time = current_time
        self.pid = pid


class EngineStateError(SimulationException):
    """
    An engine operation was called in the wrong state.

    The engine consumes its registry in place, so a finished engine
    cannot be started again.
    """

    def __init__(
        self,
        message: str,
        state: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if state is not None:
            ctx["state"] = state
        super().__init__(
            message=message,
            error_code=3002,
            context=ctx
        )
        self.state = state
