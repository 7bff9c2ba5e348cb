from .executor_base import SystemOperations
from .logger import LogSink

class Updater:
    def __init__(self, ops: SystemOperations, log: LogSink):
        self.ops = ops
        self.log = log

    def apply_updates(self) -> bool:
        """
        Install pending OS updates when running elevated.
        Returns True only if an installation was attempted and succeeded.
        """
        if not self.ops.is_elevated():
            self.log.warning("⚠️ Administrator privileges required to install updates. Skipping.")
            return False

        self.log.log("⬇️ Checking for and installing system updates (no reboot)...")
        try:
            summary = self.ops.install_updates()
        except Exception as e:
            self.log.error(f"❌ Update installation failed: {e}")
            return False

        self.log.log(f"✅ Updates applied: {summary}")
        return True
