import logging
import os

from core.error_handling import ServiceControlError
from core.executor_base import SystemOperations
from core.logger import LOGGER_NAME

logger = logging.getLogger(f"{LOGGER_NAME}.dryrun")

class MacSystemOperations(SystemOperations):
    """
    Dry-run operations for development on macOS/Linux.
    Logs what it would do without making system changes.
    """

    # Simulation Flags
    SIMULATE_STOPPED_SERVICES = {'BITS'}
    SIMULATE_START_FAILURES = set()

    def __init__(self, stopped=None, start_failures=None):
        self._stopped = set(self.SIMULATE_STOPPED_SERVICES if stopped is None else stopped)
        self._start_failures = set(self.SIMULATE_START_FAILURES if start_failures is None else start_failures)

    def query_service_state(self, name: str) -> bool:
        return name not in self._stopped

    def start_service(self, name: str) -> None:
        if name in self._start_failures:
            raise ServiceControlError(f"Simulated start failure for {name}")
        logger.info(f"Would start service: {name}")
        self._stopped.discard(name)

    def is_elevated(self) -> bool:
        return hasattr(os, 'geteuid') and os.geteuid() == 0

    def install_updates(self) -> str:
        logger.info("Would install all available updates without rebooting.")
        return "dry run, no updates installed"
