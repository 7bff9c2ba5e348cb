import platform
from abc import ABC, abstractmethod

class SystemOperations(ABC):
    """
    OS side effects used by the maintenance steps.
    Implementations raise on failure; callers decide what to catch.
    """

    @abstractmethod
    def query_service_state(self, name: str) -> bool:
        """Return True if the named service is currently running."""
        pass

    @abstractmethod
    def start_service(self, name: str) -> None:
        """
        Start the named service.
        Raises ServiceControlError if the service could not be started.
        """
        pass

    @abstractmethod
    def is_elevated(self) -> bool:
        """Return True if the current process has administrator rights."""
        pass

    @abstractmethod
    def install_updates(self) -> str:
        """
        Install every available OS update, accepting all prompts and
        never rebooting.

        Returns:
            str: A short summary of what was installed.
        Raises:
            UpdateError: if the installation did not succeed.
        """
        pass

def get_system_operations(environment: str = 'prod') -> 'SystemOperations':
    # Dev always gets the dry-run adapter, even on Windows
    system = platform.system()
    if environment == 'dev' or system == 'Darwin' or system == 'Linux':
        from platforms.mac.executor_mac import MacSystemOperations
        return MacSystemOperations()
    elif system == 'Windows':
        from platforms.windows.executor_windows import WindowsSystemOperations
        return WindowsSystemOperations()
    else:
        raise NotImplementedError(f"Unsupported platform: {system}")
