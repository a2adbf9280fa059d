"""
PySched Core Module

Core simulation components including:
- Simulation Engine
- Clock & Accountant
- Configuration Loader
"""

from .config_loader import ConfigLoader, Config, get_config
from .accountant import Accountant
from .engine import SimulationEngine, EngineState, simulate

__all__ = [
    # Config
    'ConfigLoader',
    'Config',
    'get_config',
    # Accountant
    'Accountant',
    # Engine
    'SimulationEngine',
    'EngineState',
    'simulate',
]
