"""
PySched Exception Hierarchy

This module defines the exception hierarchy for the scheduling simulator.
All custom exceptions inherit from PySchedError as the base class, with
specific sub-categories for input, configuration and engine failures.

Architecture:
    PySchedError (Base)
    ├── InputException
    │   ├── InvalidInputError
    │   └── InputFileError
    ├── ConfigurationException
    │   ├── InvalidConfigurationError
    │   └── ConfigValidationError
    └── SimulationException
        ├── InternalInvariantViolation
        └── EngineStateError
"""

from .base import PySchedError

from .input_exceptions import (
    InputException,
    InvalidInputError,
    InputFileError,
)

from .config_exceptions import (
    ConfigurationException,
    InvalidConfigurationError,
    ConfigValidationError,
)

from .simulation_exceptions import (
    SimulationException,
    InternalInvariantViolation,
    EngineStateError,
)

__all__ = [
    "PySchedError",
    # Input exceptions
    "InputException",
    "InvalidInputError",
    "InputFileError",
    # Configuration exceptions
    "ConfigurationException",
    "InvalidConfigurationError",
    "ConfigValidationError",
    # Simulation exceptions
    "SimulationException",
    "InternalInvariantViolation",
    "EngineStateError",
]
