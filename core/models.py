import os
from dataclasses import dataclass
from typing import Tuple

from .error_handling import ConfigError

@dataclass(frozen=True)
class MaintenanceConfig:
    critical_services: Tuple[str, ...] = ('wuauserv', 'BITS', 'Spooler')
    cpu_threshold: float = 80.0
    memory_threshold: float = 85.0
    disk_threshold: float = 80.0
    log_dir: str = 'logs'
    log_file: str = 'maintenance.log'
    auth_log: str = 'auth.log'
    system_log: str = 'system.log'
    failed_login_pattern: str = 'Failed password'
    error_pattern: str = 'error'
    failed_login_limit: int = 5
    error_limit: int = 10
    temp_max_age_days: int = 7
    environment: str = 'prod'
    schedule_interval_hours: int = 24

    def __post_init__(self):
        for name in ('cpu_threshold', 'memory_threshold', 'disk_threshold'):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ConfigError(f"{name} must be between 0 and 100, got {value}")
        # Lists from config.py are frozen so the service order cannot change mid-run
        object.__setattr__(self, 'critical_services', tuple(self.critical_services))

    @property
    def log_path(self) -> str:
        return os.path.join(self.log_dir, self.log_file)

    @property
    def auth_log_path(self) -> str:
        return os.path.join(self.log_dir, self.auth_log)

    @property
    def system_log_path(self) -> str:
        return os.path.join(self.log_dir, self.system_log)

@dataclass
class LogEntry:
    timestamp: str
    message: str

@dataclass
class ResourceSnapshot:
    cpu_percent: float
    memory_percent: float
    disk_percent: float

@dataclass
class ServiceCheckResult:
    service_name: str
    was_running: bool
    restart_attempted: bool = False
    restart_succeeded: bool = False

@dataclass
class LogScanResult:
    failed_logins: int
    errors: int

@dataclass
class PurgeResult:
    scanned: int = 0
    deleted: int = 0
    failed: int = 0

def load_config(module=None) -> MaintenanceConfig:
    """Build the immutable run configuration from the constants in config.py."""
    if module is None:
        import config as module
    return MaintenanceConfig(
        critical_services=tuple(getattr(module, 'CRITICAL_SERVICES', ())),
        cpu_threshold=float(getattr(module, 'CPU_THRESHOLD', 80.0)),
        memory_threshold=float(getattr(module, 'MEMORY_THRESHOLD', 85.0)),
        disk_threshold=float(getattr(module, 'DISK_THRESHOLD', 80.0)),
        log_dir=getattr(module, 'LOG_DIR', 'logs'),
        log_file=getattr(module, 'LOG_FILE', 'maintenance.log'),
        auth_log=getattr(module, 'AUTH_LOG', 'auth.log'),
        system_log=getattr(module, 'SYSTEM_LOG', 'system.log'),
        failed_login_pattern=getattr(module, 'FAILED_LOGIN_PATTERN', 'Failed password'),
        error_pattern=getattr(module, 'ERROR_PATTERN', 'error'),
        failed_login_limit=int(getattr(module, 'FAILED_LOGIN_LIMIT', 5)),
        error_limit=int(getattr(module, 'ERROR_LIMIT', 10)),
        temp_max_age_days=int(getattr(module, 'TEMP_MAX_AGE_DAYS', 7)),
        environment=getattr(module, 'ENVIRONMENT', 'prod'),
        schedule_interval_hours=int(getattr(module, 'SCHEDULE_INTERVAL_HOURS', 24)),
    )
