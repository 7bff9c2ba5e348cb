import logging
import os
import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import List

from .models import LogEntry

LOG_FORMAT = '%(asctime)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
SEPARATOR = ' - '
# Parent of the module loggers whose records belong in the maintenance log
LOGGER_NAME = 'maintenance'

class LogSink(ABC):
    @abstractmethod
    def log(self, message: str, level: int = logging.INFO) -> None:
        """
        Append one line to the maintenance log.
        The level only routes the record; it is not part of the line.
        """
        pass

    def warning(self, message: str) -> None:
        self.log(message, logging.WARNING)

    def error(self, message: str) -> None:
        self.log(message, logging.ERROR)

class FileLogSink(LogSink):
    """
    Writes '<timestamp> - <message>' to stdout and appends it to the log file.
    The log directory must already exist (see core.workspace.bootstrap).

    Sinks are keyed by logger name: opening a new sink under a name replaces
    the handlers of the previous one, so only the newest sink's file receives
    lines. Module loggers named 'maintenance.<x>' propagate into the sink
    opened under the default name.
    """

    def __init__(self, log_path: str, name: str = LOGGER_NAME, stream=None):
        self.log_path = log_path
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        # Re-opening a sink for the same logger must not duplicate lines
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        console = logging.StreamHandler(stream if stream is not None else sys.stdout)
        console.setFormatter(formatter)

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)

        self._handlers = [console, file_handler]
        for handler in self._handlers:
            self._logger.addHandler(handler)

    def log(self, message: str, level: int = logging.INFO) -> None:
        self._logger.log(level, message)

    def close(self):
        # Only this sink's handlers; a newer sink under the same name keeps its own
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers = []

def parse_log_line(line: str) -> LogEntry:
    timestamp, sep, message = line.rstrip('\n').partition(SEPARATOR)
    if not sep:
        return LogEntry(timestamp='', message=timestamp)
    return LogEntry(timestamp=timestamp, message=message)

def read_log_entries(log_path: str, limit: int = 100) -> List[LogEntry]:
    """Return the last `limit` entries of the maintenance log, oldest first."""
    if not os.path.exists(log_path):
        return []
    with open(log_path, 'r', encoding='utf-8', errors='replace') as f:
        tail = deque((line for line in f if line.strip()), maxlen=limit)
    return [parse_log_line(line) for line in tail]
