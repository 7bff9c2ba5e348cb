import datetime
import logging
import os

import pytest

from core.error_handling import ServiceControlError, UpdateError
from core.executor_base import SystemOperations
from core.logger import LogSink
from core.models import LogEntry, MaintenanceConfig, ResourceSnapshot
from core.monitor_base import MonitorBase

class CaptureLog(LogSink):
    """Keeps log lines in memory instead of writing them to disk."""

    def __init__(self):
        self.entries = []
        self.levels = []

    def log(self, message, level=logging.INFO):
        self.entries.append(LogEntry(timestamp=datetime.datetime.now().isoformat(), message=message))
        self.levels.append(level)

    @property
    def messages(self):
        return [e.message for e in self.entries]

    def containing(self, text):
        return [m for m in self.messages if text in m]

class FakeMonitor(MonitorBase):
    def __init__(self, cpu=10.0, memory=20.0, disk=30.0):
        self.snapshot = ResourceSnapshot(cpu_percent=cpu, memory_percent=memory, disk_percent=disk)

    def get_resource_snapshot(self):
        return self.snapshot

class FakeOps(SystemOperations):
    def __init__(self, stopped=(), start_failures=(), elevated=False, update_error=None):
        self.stopped = set(stopped)
        self.start_failures = set(start_failures)
        self.elevated = elevated
        self.update_error = update_error
        self.queried = []
        self.started = []
        self.install_calls = 0

    def query_service_state(self, name):
        self.queried.append(name)
        return name not in self.stopped

    def start_service(self, name):
        self.started.append(name)
        if name in self.start_failures:
            raise ServiceControlError("StartService returned 2")
        self.stopped.discard(name)

    def is_elevated(self):
        return self.elevated

    def install_updates(self):
        self.install_calls += 1
        if self.update_error:
            raise UpdateError(self.update_error)
        return "Installed 2 updates"

@pytest.fixture
def capture_log():
    return CaptureLog()

@pytest.fixture
def config(tmp_path):
    return MaintenanceConfig(
        critical_services=('wuauserv', 'BITS', 'Spooler'),
        log_dir=str(tmp_path / 'logs'),
    )

@pytest.fixture
def log_files(config):
    """Empty auth and system logs under the config's log directory."""
    os.makedirs(config.log_dir, exist_ok=True)
    for path in (config.auth_log_path, config.system_log_path):
        open(path, 'w').close()
    return config

@pytest.fixture
def empty_temp(tmp_path):
    path = tmp_path / 'temp'
    path.mkdir()
    return str(path)
