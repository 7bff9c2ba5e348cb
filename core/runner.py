from typing import Optional

from .analyzer import ResourceMonitor
from .cleaner import Cleaner
from .executor_base import SystemOperations
from .log_analyzer import LogAnalyzer
from .logger import LogSink
from .models import MaintenanceConfig
from .monitor_base import MonitorBase
from .updater import Updater

START_BANNER = "===== 🛠️ System maintenance started ====="
END_BANNER = "===== ✅ System maintenance completed ====="

class MaintenanceRunner:
    """
    Runs the maintenance steps once, strictly in order:
    resources -> logs -> cleanup/services -> updates.

    Steps talk to each other only through the shared log. Cleanup and updates
    catch their own failures; anything else propagates and ends the run.
    """

    def __init__(self, config: MaintenanceConfig, log: LogSink, monitor: MonitorBase,
                 ops: SystemOperations, cleaner: Optional[Cleaner] = None):
        self.config = config
        self.log = log
        self.resource_monitor = ResourceMonitor(config, monitor, log)
        self.log_analyzer = LogAnalyzer(config, log)
        self.cleaner = cleaner or Cleaner(config, ops, log)
        self.updater = Updater(ops, log)

    def run(self):
        self.log.log(START_BANNER)
        self.resource_monitor.check_resources()
        self.log_analyzer.analyze_logs()
        self.cleaner.optimize_performance()
        self.updater.apply_updates()
        self.log.log(END_BANNER)
