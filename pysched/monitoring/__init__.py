"""
Monitoring Module

Trace records and statistics produced by a simulation run.
"""

from .metrics import TraceRecord, ProcessSummary, SimulationResult

__all__ = ['TraceRecord', 'ProcessSummary', 'SimulationResult']
