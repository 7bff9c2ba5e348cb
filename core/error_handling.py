import functools
import logging
import traceback

# Child of the maintenance logger so failures land in the maintenance log
logger = logging.getLogger('maintenance.errors')

def safe_execute(default_return=None):
    """
    Decorator to wrap functions in a try/except block.
    Logs errors and returns a default value on failure.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in {func.__name__}: {str(e)}")
                logger.debug(traceback.format_exc())
                return default_return
        return wrapper
    return decorator

class AppError(Exception):
    """Base custom exception class."""
    pass

class ConfigError(AppError):
    """Invalid maintenance configuration."""
    pass

class ServiceControlError(AppError):
    """A service could not be started."""
    pass

class UpdateError(AppError):
    """OS update installation failed."""
    pass
