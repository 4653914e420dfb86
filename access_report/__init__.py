"""Access Report package"""

from .patterns import VERSION
from .models import LogRecord, LogTimestamp
from .errors import LogFileError, LogFileNotFoundError, EmptyLogFileError, NoValidEntriesError
from .parser import parse_line, validate_log_file
from .analyzer import LogAnalyzer
from .output import render_report, print_report

__all__ = [
    'VERSION', 'LogAnalyzer', 'LogRecord', 'LogTimestamp', 'parse_line', 'validate_log_file',
    'render_report', 'print_report', 'LogFileError', 'LogFileNotFoundError',
    'EmptyLogFileError', 'NoValidEntriesError',
]
