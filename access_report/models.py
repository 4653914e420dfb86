"""Access Report - Data models"""

import re
from dataclasses import dataclass
from typing import Optional

from .patterns import FAILURE_STATUS_PATTERN

FAILURE_STATUS = re.compile(FAILURE_STATUS_PATTERN)


@dataclass(frozen=True)
class LogTimestamp:
    """Bracketed request time, kept as written in the log"""
    day: str
    month: str
    year: str
    hour: int
    minute: int
    second: int
    zone: Optional[str] = None

    @property
    def day_key(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass(frozen=True)
class LogRecord:
    """Parsed access log line"""
    client_address: Optional[str]
    method: Optional[str]
    timestamp: Optional[LogTimestamp]
    status_code: Optional[str]
    raw: str
    line_number: int

    @property
    def day_key(self) -> Optional[str]:
        return self.timestamp.day_key if self.timestamp else None

    @property
    def hour(self) -> Optional[int]:
        return self.timestamp.hour if self.timestamp else None

    @property
    def is_failure(self) -> bool:
        return bool(self.status_code and FAILURE_STATUS.match(self.status_code))

    @property
    def complete(self) -> bool:
        return None not in (self.client_address, self.method, self.timestamp, self.status_code)
