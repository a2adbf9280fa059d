"""
PySched Logger Module

Structured logging for the scheduling simulator:
- Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Subsystem-specific loggers ('engine', 'scheduler_rr', 'loader', ...)
- Per-record process id and context data
- Optional file output
- In-memory log buffer for inspection after a run

Console output goes to stderr; stdout is reserved for the report.

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List, TextIO

from pysched.exceptions import ConfigValidationError


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogFormatter(logging.Formatter):
    """
    Log formatter for PySched.

    Output layout:
        [timestamp] LEVEL [subsystem] (pid=N) message {key=value ...}
    """

    # ANSI color codes for terminal output
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True, stream: Optional[TextIO] = None):
        super().__init__()
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)

    @staticmethod
    def _supports_color(stream: TextIO) -> bool:
        """Check if the stream is a terminal."""
        if not hasattr(stream, 'isatty'):
            return False
        return stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")

        if hasattr(record, 'pid') and record.pid is not None:
            components.append(f"(pid={record.pid})")

        components.append(str(record.getMessage()))

        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        message = " ".join(components)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class MemoryLogHandler(logging.Handler):
    """
    Keeps log records in memory.

    Every record is stored as a dictionary so that a finished run can be
    inspected (for example by tests) without parsing formatted text.
    """

    def __init__(self, max_entries: int = 10000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'subsystem': getattr(record, 'subsystem', None),
            'pid': getattr(record, 'pid', None),
            'context': getattr(record, 'context', {}),
        }

        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]

    def get_logs(
        self,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [l for l in logs if l['level'] == level]

        if subsystem:
            logs = [l for l in logs if l['subsystem'] == subsystem]

        return logs[-limit:]

    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Subsystem logger for PySched.

    There is one instance per subsystem name. Every instance writes to a
    child of the 'pysched' logger, so handlers installed by `initialize`
    see all of them.

    Example:
        >>> log = Logger('engine')
        >>> log.info("Simulation started", context={'processes': 4})
        >>> log.debug("Process completed", pid=2)
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _memory_handler: Optional[MemoryLogHandler] = None
    _log_files: set[str] = set()

    def __new__(cls, subsystem: str = 'engine') -> 'Logger':
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'pysched.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.INFO,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console_output: bool = True
    ) -> None:
        """
        Install the PySched log handlers.

        The level, buffer and console handlers are set up by the first call
        only. A log file is attached whenever a call names one that is not
        attached yet.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console_output: Whether to log to stderr

        Raises:
            ConfigValidationError: If the log file cannot be created
        """
        root_logger = logging.getLogger('pysched')

        with cls._lock:
            if not cls._initialized:
                root_logger.setLevel(level)

                cls._memory_handler = MemoryLogHandler()
                cls._memory_handler.setLevel(level)
                root_logger.addHandler(cls._memory_handler)

                if console_output:
                    console_handler = logging.StreamHandler(sys.stderr)
                    console_handler.setLevel(level)
                    console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                    root_logger.addHandler(console_handler)
                else:
                    # Keep records away from the logging.lastResort handler
                    root_logger.propagate = False

                cls._initialized = True

            if log_file and log_file not in cls._log_files:
                root_logger.addHandler(cls._open_log_file(log_file, level))
                cls._log_files.add(log_file)

    @staticmethod
    def _open_log_file(log_file: str, level: int) -> logging.FileHandler:
        """Create the file handler, making parent directories as needed."""
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file)
        except OSError as e:
            raise ConfigValidationError(
                f"Cannot open log file: {e.strerror or e}",
                context={'path': log_file}
            )
        handler.setLevel(level)
        handler.setFormatter(LogFormatter(use_colors=False))
        return handler

    @classmethod
    def get_buffered_logs(
        cls,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Records kept in memory since `initialize`, oldest first."""
        if cls._memory_handler is None:
            return []
        return cls._memory_handler.get_logs(level=level, subsystem=subsystem, limit=limit)

    def _log(
        self,
        level: int,
        message: str,
        pid: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        self._logger.log(level, message, extra={
            'subsystem': self._subsystem,
            'pid': pid,
            'context': context or {},
        })

    def debug(self, message: str, pid: Optional[int] = None,
              context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.DEBUG, message, pid, context)

    def info(self, message: str, pid: Optional[int] = None,
             context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.INFO, message, pid, context)

    def warning(self, message: str, pid: Optional[int] = None,
                context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.WARNING, message, pid, context)

    def error(self, message: str, pid: Optional[int] = None,
              context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.ERROR, message, pid, context)

    def critical(self, message: str, pid: Optional[int] = None,
                 context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.CRITICAL, message, pid, context)


def get_logger(subsystem: str) -> Logger:
    """Get the logger for a subsystem such as 'engine' or 'loader'."""
    return Logger(subsystem)
