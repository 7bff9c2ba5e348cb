import sys

from core.executor_base import get_system_operations
from core.models import load_config
from core.monitor_base import get_monitor
from core.runner import MaintenanceRunner
from core.workspace import bootstrap

def main() -> int:
    config = load_config()
    log = bootstrap(config)
    try:
        runner = MaintenanceRunner(config, log, get_monitor(), get_system_operations(config.environment))
        runner.run()
    finally:
        log.close()
    return 0

if __name__ == '__main__':
    sys.exit(main())
