from .logger import LogSink
from .models import LogScanResult, MaintenanceConfig

def count_matching_lines(path: str, pattern: str) -> int:
    """Count lines containing `pattern` (case-sensitive). Missing files raise."""
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return sum(1 for line in f if pattern in line)

class LogAnalyzer:
    def __init__(self, config: MaintenanceConfig, log: LogSink):
        self.config = config
        self.log = log

    def analyze_logs(self) -> LogScanResult:
        result = LogScanResult(
            failed_logins=count_matching_lines(self.config.auth_log_path, self.config.failed_login_pattern),
            errors=count_matching_lines(self.config.system_log_path, self.config.error_pattern),
        )
        self.log.log(f"🔍 Failed login attempts: {result.failed_logins} | System errors: {result.errors}")

        if result.failed_logins > self.config.failed_login_limit:
            self.log.warning(f"🚨 Warning: multiple failed login attempts detected ({result.failed_logins})")
        if result.errors > self.config.error_limit:
            self.log.warning(f"⚠️ High number of system errors detected ({result.errors})")
        return result
