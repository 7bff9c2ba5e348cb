import platform
from abc import ABC, abstractmethod

from .models import ResourceSnapshot

class MonitorBase(ABC):
    @abstractmethod
    def get_resource_snapshot(self) -> ResourceSnapshot:
        """
        Collect current CPU, memory and primary-volume disk utilization.
        All three values are percentages in the range 0-100.
        """
        pass

def memory_percent(total: int, free: int) -> float:
    """Memory in use as 1 - free/total, in percent rounded to 2 decimals."""
    if total <= 0:
        return 0.0
    return round((1 - free / total) * 100, 2)

def disk_percent(used: int, free: int) -> float:
    """Disk in use as used / (used + free), in percent rounded to 2 decimals."""
    if used + free <= 0:
        return 0.0
    return round(used / (used + free) * 100, 2)

def get_monitor() -> 'MonitorBase':
    system = platform.system()
    if system == 'Darwin' or system == 'Linux':
        from platforms.mac.monitor_mac import MacMonitor
        return MacMonitor()
    elif system == 'Windows':
        from platforms.windows.monitor_windows import WindowsMonitor
        return WindowsMonitor()
    else:
        raise NotImplementedError(f"Unsupported platform: {system}")
