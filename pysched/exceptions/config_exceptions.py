"""
Configuration Exceptions

Exceptions related to scheduler parameters and configuration files.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .base import PySchedError


class ConfigurationException(PySchedError):
    """Base exception for configuration errors."""

    kind = "ConfigurationError"

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or 2000,
            context=context
        )


class InvalidConfigurationError(ConfigurationException):
    """
    A scheduling policy was given an unusable parameter.

    Raised at policy construction, for example when the Round Robin
    quantum is not a positive integer or the algorithm name is unknown.

    Example:
        >>> raise InvalidConfigurationError("Time quantum must be positive",
        ...                                 parameter="quantum", value=0)
    """

    kind = "InvalidConfiguration"

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Any = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if parameter is not None:
            ctx[parameter] = value
        super().__init__(
            message=message,
            error_code=2001,
            context=ctx
        )
        self.parameter = parameter
        self.value = value


class ConfigValidationError(ConfigurationException):
    """Raised when a configuration file cannot be loaded or validated."""

    def __init__(
        self,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=2002,
            context=context
        )
