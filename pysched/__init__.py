"""
PySched - A CPU Scheduling Simulator

This package simulates FCFS, preemptive SJF and Round Robin scheduling
over discrete time ticks and reports per-process wait and turnaround
statistics, implemented in Python 3.10+ using only the standard library.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# Import main components for convenience
from .core.engine import SimulationEngine, EngineState, simulate
from .process.registry import ProcessRegistry
from .process.scheduler import (
    FCFSScheduler,
    SJFScheduler,
    RoundRobinScheduler,
    create_scheduler,
)

__all__ = [
    'SimulationEngine',
    'EngineState',
    'simulate',
    'ProcessRegistry',
    'FCFSScheduler',
    'SJFScheduler',
    'RoundRobinScheduler',
    'create_scheduler',
]
