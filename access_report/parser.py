"""Access Report - Line parser and pre-flight checks"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import EmptyLogFileError, LogFileNotFoundError, NoValidEntriesError
from .models import LogRecord, LogTimestamp
from .patterns import (
    ACCESS_LOG_PATTERN, IPV4_SHAPE_PATTERN, METHOD_FIELD, STATUS_FIELD,
    STATUS_PATTERN, TIMESTAMP_PATTERN,
)

logger = logging.getLogger(__name__)

ACCESS_LOG = re.compile(ACCESS_LOG_PATTERN)
TIMESTAMP = re.compile(TIMESTAMP_PATTERN)
STATUS = re.compile(STATUS_PATTERN)
IPV4_SHAPE = re.compile(IPV4_SHAPE_PATTERN)

PathLike = Union[str, Path]


def parse_timestamp(text: str) -> Optional[LogTimestamp]:
    """Find the first bracketed ``[day/month/year:HH:MM:SS zone]`` field."""
    match = TIMESTAMP.search(text)
    if not match:
        return None
    groups = match.groupdict()
    return LogTimestamp(
        day=groups['day'],
        month=groups['month'],
        year=groups['year'],
        hour=int(groups['hour']),
        minute=int(groups['minute']),
        second=int(groups['second']),
        zone=groups.get('zone'),
    )


def _field(fields: List[str], index: int) -> Optional[str]:
    return fields[index] if len(fields) > index else None


def parse_line(line: str, line_number: int = 0) -> LogRecord:
    """Turn one access log line into a LogRecord.

    Well-formed lines are read with the full access log pattern. Anything
    else falls back to positional fields, and whatever cannot be found is
    left as None. Never raises.
    """
    line = line.rstrip('\r\n')

    match = ACCESS_LOG.match(line)
    if match:
        groups = match.groupdict()
        timestamp = parse_timestamp(f"[{groups['timestamp']}]")
        if timestamp:
            return LogRecord(
                client_address=groups['ip'],
                method=groups['method'],
                timestamp=timestamp,
                status_code=groups['status'],
                raw=line,
                line_number=line_number,
            )

    fields = line.split()
    method = _field(fields, METHOD_FIELD)
    if method is not None:
        method = method[1:] if method.startswith('"') else method
    status = _field(fields, STATUS_FIELD)

    record = LogRecord(
        client_address=_field(fields, 0),
        method=method or None,
        timestamp=parse_timestamp(line),
        status_code=status if status and STATUS.match(status) else None,
        raw=line,
        line_number=line_number,
    )
    logger.debug("Line %d only partially parsed: %r", line_number, line)
    return record


def parse_lines(lines: Iterable[str]) -> List[LogRecord]:
    return [parse_line(line, i) for i, line in enumerate(lines, 1)]


def validate_log_file(filepath: PathLike) -> Path:
    """Pre-flight checks, run once before any line is parsed.

    Raises LogFileNotFoundError, EmptyLogFileError or NoValidEntriesError.
    """
    path = Path(filepath)
    if not path.is_file():
        raise LogFileNotFoundError(filepath)
    if path.stat().st_size == 0:
        raise EmptyLogFileError(filepath)

    with open(path, 'r', encoding='utf-8', errors='ignore', newline='\n') as f:
        if not any(IPV4_SHAPE.match(line) for line in f):
            raise NoValidEntriesError(filepath)

    return path


def read_lines(filepath: PathLike) -> List[str]:
    with open(filepath, 'r', encoding='utf-8', errors='ignore', newline='\n') as f:
        return [line.rstrip('\r\n') for line in f]


def read_records(filepath: PathLike) -> List[LogRecord]:
    return parse_lines(read_lines(filepath))
