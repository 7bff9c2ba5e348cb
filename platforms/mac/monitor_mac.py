import psutil

from core.models import ResourceSnapshot
from core.monitor_base import MonitorBase, disk_percent, memory_percent

class MacMonitor(MonitorBase):
    ROOT_VOLUME = '/'

    def get_resource_snapshot(self) -> ResourceSnapshot:
        # CPU
        cpu = psutil.cpu_percent(interval=1)

        # Memory
        mem = psutil.virtual_memory()

        # Disk
        disk = psutil.disk_usage(self.ROOT_VOLUME)

        return ResourceSnapshot(
            cpu_percent=cpu,
            memory_percent=memory_percent(mem.total, mem.available),
            disk_percent=disk_percent(disk.used, disk.free),
        )
