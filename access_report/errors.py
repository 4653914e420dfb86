"""Access Report - Pre-flight errors"""


class LogFileError(Exception):
    """Log file cannot be analyzed at all"""

    reason = "cannot be analyzed"

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Log file '{self.path}' {self.reason}")


class LogFileNotFoundError(LogFileError, FileNotFoundError):
    reason = "not found"


class EmptyLogFileError(LogFileError):
    reason = "is empty"


class NoValidEntriesError(LogFileError):
    reason = "contains no valid Apache log entries"
