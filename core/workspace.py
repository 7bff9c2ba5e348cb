import os

from .logger import FileLogSink, LogSink
from .models import MaintenanceConfig

def ensure_log_directory(log_dir: str) -> bool:
    """Create the log directory. Returns True if it did not exist before."""
    if os.path.isdir(log_dir):
        return False
    os.makedirs(log_dir, exist_ok=True)
    return True

def prepare_placeholder_logs(config: MaintenanceConfig, log: LogSink) -> None:
    # Empty stand-ins so the log analysis always has something to read
    for path in (config.auth_log_path, config.system_log_path):
        if not os.path.exists(path):
            open(path, 'a', encoding='utf-8').close()
            log.log(f"📄 Created placeholder log file: {path}")

def bootstrap(config: MaintenanceConfig, stream=None) -> FileLogSink:
    # The directory has to exist before the file handler opens the log
    created = ensure_log_directory(config.log_dir)
    log = FileLogSink(config.log_path, stream=stream)
    if created:
        log.log(f"📁 Created log directory: {config.log_dir}")
    prepare_placeholder_logs(config, log)
    return log
