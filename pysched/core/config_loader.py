"""
PySched Configuration Loader

Configuration management for the simulator:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pysched.exceptions import ConfigValidationError


ALGORITHMS = ('fcfs', 'sjf', 'round_robin', 'rr')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class SchedulerConfig:
    """Scheduler configuration settings."""
    algorithm: str = "fcfs"
    quantum: int = 2


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class ReportConfig:
    """Report output settings."""
    show_trace: bool = True
    show_timeline: bool = False
    precision: int = 1


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for a simulation run.
    """
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.scheduler.algorithm)
        round_robin
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigValidationError: If the file cannot be loaded, parsed
                or validated
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigValidationError(
                f"Configuration file not found: {config_path}",
                context={'path': config_path}
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(
                f"Invalid JSON in configuration file: {e}",
                context={'path': config_path}
            )
        except OSError as e:
            raise ConfigValidationError(
                f"Cannot read configuration file: {e}",
                context={'path': config_path}
            )

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration root must be a JSON object",
                context={'path': config_path}
            )

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        # Parse scheduler config
        if 'scheduler' in data:
            sched_data = self._section(data, 'scheduler')
            config.scheduler = SchedulerConfig(
                algorithm=sched_data.get('algorithm', config.scheduler.algorithm),
                quantum=sched_data.get('quantum', config.scheduler.quantum),
            )

        # Parse logging config
        if 'logging' in data:
            log_data = self._section(data, 'logging')
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
            )

        # Parse report config
        if 'report' in data:
            report_data = self._section(data, 'report')
            config.report = ReportConfig(
                show_trace=report_data.get('show_trace', config.report.show_trace),
                show_timeline=report_data.get('show_timeline', config.report.show_timeline),
                precision=report_data.get('precision', config.report.precision),
            )

        self._validate(config)
        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        """Return a configuration section, which must be a JSON object."""
        section = data[name]
        if not isinstance(section, dict):
            raise ConfigValidationError(
                f"Configuration section '{name}' must be a JSON object"
            )
        return section

    @staticmethod
    def _validate(config: Config) -> None:
        """Check value types and values that have a closed set of choices."""
        if config.scheduler.algorithm not in ALGORITHMS:
            raise ConfigValidationError(
                f"Unknown scheduling algorithm: {config.scheduler.algorithm}",
                context={'choices': ", ".join(ALGORITHMS)}
            )

        quantum = config.scheduler.quantum
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
            raise ConfigValidationError(
                f"Scheduler quantum must be a positive integer: {quantum!r}",
                context={'quantum': repr(quantum)}
            )

        if str(config.logging.level).upper() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"Unknown log level: {config.logging.level}",
                context={'choices': ", ".join(LOG_LEVELS)}
            )
        config.logging.level = str(config.logging.level).upper()

        precision = config.report.precision
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ConfigValidationError(
                f"Report precision must be a non-negative integer: {precision}"
            )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        """Whether a configuration file has been loaded."""
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'scheduler.quantum')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'scheduler.quantum')
            value: Value to set

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigValidationError(f"Invalid configuration key: {key}")

    def reset(self) -> None:
        """Return to the built-in defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
