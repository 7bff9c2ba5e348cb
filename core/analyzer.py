from typing import List, Tuple

from .logger import LogSink
from .models import MaintenanceConfig, ResourceSnapshot
from .monitor_base import MonitorBase

def format_percent(value: float) -> str:
    # 85.0 -> '85', 85.25 -> '85.25'
    return f"{value:g}"

def find_breaches(snapshot: ResourceSnapshot, config: MaintenanceConfig) -> List[Tuple[str, float, float]]:
    """
    Return (metric, value, threshold) for every metric strictly above its threshold,
    in CPU, memory, disk order.
    """
    checks = [
        ('cpu', snapshot.cpu_percent, config.cpu_threshold),
        ('memory', snapshot.memory_percent, config.memory_threshold),
        ('disk', snapshot.disk_percent, config.disk_threshold),
    ]
    return [(metric, value, threshold) for metric, value, threshold in checks if value > threshold]

class ResourceMonitor:
    WARNINGS = {
        'cpu': "⚠️ High CPU usage detected: {value}% (threshold {threshold}%)",
        'memory': "⚠️ High memory usage detected: {value}% (threshold {threshold}%)",
        'disk': "⚠️ Disk usage exceeds threshold: {value}% (threshold {threshold}%)",
    }

    def __init__(self, config: MaintenanceConfig, monitor: MonitorBase, log: LogSink):
        self.config = config
        self.monitor = monitor
        self.log = log

    def check_resources(self) -> ResourceSnapshot:
        snapshot = self.monitor.get_resource_snapshot()
        self.log.log(
            f"📊 CPU: {format_percent(snapshot.cpu_percent)}% | "
            f"Memory: {format_percent(snapshot.memory_percent)}% | "
            f"Disk: {format_percent(snapshot.disk_percent)}%"
        )
        for metric, value, threshold in find_breaches(snapshot, self.config):
            self.log.warning(self.WARNINGS[metric].format(
                value=format_percent(value),
                threshold=format_percent(threshold),
            ))
        return snapshot
