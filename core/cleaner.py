import os
import tempfile
import time
from typing import Callable, List, Optional

from .executor_base import SystemOperations
from .logger import LogSink
from .models import MaintenanceConfig, PurgeResult, ServiceCheckResult

SECONDS_PER_DAY = 24 * 60 * 60

class Cleaner:
    """
    Best-effort housekeeping: purge stale temp files, then make sure every
    critical service is running.
    """

    def __init__(self, config: MaintenanceConfig, ops: SystemOperations, log: LogSink,
                 temp_dir: Optional[str] = None, clock: Callable[[], float] = time.time,
                 remove: Callable[[str], None] = os.remove):
        self.config = config
        self.ops = ops
        self.log = log
        self.temp_dir = temp_dir or tempfile.gettempdir()
        self.clock = clock
        self.remove = remove

    def optimize_performance(self):
        purge = self.purge_temp_files()
        services = self.check_services()
        return purge, services

    def purge_temp_files(self) -> PurgeResult:
        result = PurgeResult()
        cutoff = self.clock() - self.config.temp_max_age_days * SECONDS_PER_DAY

        for root, _dirs, files in os.walk(self.temp_dir):
            for name in files:
                path = os.path.join(root, name)
                result.scanned += 1
                try:
                    if os.stat(path).st_atime >= cutoff:
                        continue
                except OSError:
                    # Vanished or unreadable between listing and stat
                    result.failed += 1
                    continue
                try:
                    self.remove(path)
                    result.deleted += 1
                except OSError:
                    # Locked or permission-denied files stay behind
                    result.failed += 1

        self.log.log(
            f"🧹 Temp cleanup finished: removed {result.deleted} files older than "
            f"{self.config.temp_max_age_days} days from {self.temp_dir}"
        )
        return result

    def check_services(self) -> List[ServiceCheckResult]:
        results = []
        for name in self.config.critical_services:
            results.append(self._check_service(name))
        return results

    def _check_service(self, name: str) -> ServiceCheckResult:
        if self.ops.query_service_state(name):
            self.log.log(f"✅ Service {name} is running")
            return ServiceCheckResult(service_name=name, was_running=True)

        self.log.warning(f"⚠️ Service {name} is not running")
        result = ServiceCheckResult(service_name=name, was_running=False, restart_attempted=True)
        self.log.log(f"🔄 Attempting to start service {name}")
        try:
            self.ops.start_service(name)
        except Exception as e:
            self.log.error(f"❌ Failed to start service {name}: {e}")
            return result

        result.restart_succeeded = True
        self.log.log(f"✅ Service {name} started successfully")
        return result
