"""
Process Management Module

Provides the process model, the process registry and the
scheduling policies.
"""

from .process import Process
from .registry import ProcessRegistry
from .scheduler import (
    SchedulerAlgorithm,
    FCFSScheduler,
    SJFScheduler,
    RoundRobinScheduler,
    create_scheduler,
)

__all__ = [
    'Process',
    'ProcessRegistry',
    'SchedulerAlgorithm',
    'FCFSScheduler',
    'SJFScheduler',
    'RoundRobinScheduler',
    'create_scheduler',
]
