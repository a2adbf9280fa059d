"""
Input Exceptions

Exceptions raised while reading and validating the process list.
These are detected before the simulation starts so that nothing is
partially run.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .base import PySchedError


class InputException(PySchedError):
    """
    Base exception for all input-related errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    kind = "InputError"

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or 1000,
            context=context
        )


class InvalidInputError(InputException):
    """
    The process list cannot be simulated.

    Raised when the process list is empty or when an entry has a
    burst time that is not a positive integer.

    Example:
        >>> raise InvalidInputError("Burst time must be positive", index=2, value=0)
    """

    kind = "InvalidInput"

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        value: Any = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if index is not None:
            ctx["entry"] = index
            ctx["burst_time"] = value
        super().__init__(
            message=message,
            error_code=1001,
            context=ctx
        )
        self.index = index
        self.value = value


class InputFileError(InputException):
    """
    The process file could not be opened or read.

    Example:
        >>> raise InputFileError("Could not open file", path="processes.txt")
    """

    def __init__(
        self,
        message: str,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["path"] = path
        super().__init__(
            message=message,
            error_code=1002,
            context=ctx
        )
        self.path = path
