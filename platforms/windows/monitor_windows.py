import os

import psutil

from core.models import ResourceSnapshot
from core.monitor_base import MonitorBase, disk_percent, memory_percent

class WindowsMonitor(MonitorBase):
    def __init__(self, volume=None):
        # Default to the system drive, usually C:\
        self.volume = volume or os.environ.get('SystemDrive', 'C:') + '\\'

    def get_resource_snapshot(self) -> ResourceSnapshot:
        cpu = psutil.cpu_percent(interval=1)
        # On Windows psutil's 'available' is the OS free physical memory
        mem = psutil.virtual_memory()
        disk = psutil.disk_usage(self.volume)

        return ResourceSnapshot(
            cpu_percent=cpu,
            memory_percent=memory_percent(mem.total, mem.available),
            disk_percent=disk_percent(disk.used, disk.free),
        )
