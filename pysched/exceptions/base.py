"""
Base Exception

Root of the PySched exception hierarchy. Every error raised by the
simulator carries a message, a numeric error code, a taxonomy kind and
a context dictionary describing the offending values.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class PySchedError(Exception):
    """
    Base exception for all PySched errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        kind: Taxonomy name reported to the user
        context: Additional context about the error (offending values)

    Example:
        >>> raise PySchedError("Simulation failure", error_code=1)
    """

    kind: str = "PySchedError"

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 0
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.kind}: {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )
