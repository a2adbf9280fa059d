"""
Process Loader Module

Reads the process list from a text file. Each line describes one process
as `P<name>,<burst>`, for example:

    P0,3
    P1,2

Lines that do not follow this format are skipped. Burst values are
passed on as read; the registry decides whether they are acceptable.

Author: YSNRFD
Version: 1.0.0
"""

import re
from pathlib import Path
from typing import Iterable, List

from pysched.exceptions import InputFileError
from pysched.logger import get_logger


LINE_PATTERN = re.compile(r'^P([^,]+),\s*([+-]?\d+)')

_logger = get_logger('loader')


def parse_process_lines(lines: Iterable[str]) -> List[int]:
    """
    Extract burst times from process lines.

    Args:
        lines: Lines of the process file

    Returns:
        Burst times in input order
    """
    bursts = []
    for line_no, line in enumerate(lines, start=1):
        match = LINE_PATTERN.match(line)
        if match is None:
            if line.strip():
                _logger.warning(
                    "Skipped malformed process line",
                    context={'line': line_no, 'text': line.strip()[:40]}
                )
            continue
        bursts.append(int(match.group(2)))
    return bursts


def load_process_file(path: str) -> List[int]:
    """
    Read burst times from a process file.

    Args:
        path: Path to the file

    Returns:
        Burst times in input order

    Raises:
        InputFileError: If the file cannot be opened or read
    """
    file_path = Path(path)

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            bursts = parse_process_lines(f)
    except OSError as e:
        _logger.error("Could not open process file", context={'path': str(path)})
        raise InputFileError(f"Could not open file {path}: {e.strerror}", path=str(path))
    except UnicodeDecodeError:
        _logger.error("Process file is not valid UTF-8 text", context={'path': str(path)})
        raise InputFileError(f"Could not read file {path}: not a text file", path=str(path))

    _logger.info("Loaded process file", context={'path': str(path), 'processes': len(bursts)})
    return bursts
