# Runtime configuration for the maintenance runner.
# 'dev' forces the dry-run platform adapter even on Windows.
ENVIRONMENT = 'prod'

# Services restarted if found stopped, checked in this order
CRITICAL_SERVICES = ['wuauserv', 'BITS', 'Spooler']

# Usage percentages; a warning is logged when a value is strictly above
CPU_THRESHOLD = 80
MEMORY_THRESHOLD = 85
DISK_THRESHOLD = 80

# Relative to the working directory
LOG_DIR = 'logs'
LOG_FILE = 'maintenance.log'
AUTH_LOG = 'auth.log'
SYSTEM_LOG = 'system.log'

FAILED_LOGIN_PATTERN = 'Failed password'
ERROR_PATTERN = 'error'
FAILED_LOGIN_LIMIT = 5
ERROR_LIMIT = 10

TEMP_MAX_AGE_DAYS = 7

# Service mode (api_app.py)
SCHEDULE_INTERVAL_HOURS = 24
API_HOST = '127.0.0.1'
API_PORT = 5000
