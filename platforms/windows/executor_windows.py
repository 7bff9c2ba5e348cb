import ctypes
import subprocess
from typing import Optional, Tuple

from core.error_handling import ServiceControlError, UpdateError, safe_execute
from core.executor_base import SystemOperations

# Win32_Service.StartService return codes treated as success
START_OK = 0
START_ALREADY_RUNNING = 10

# Windows Update Agent result code for a fully successful install
WU_RESULT_SUCCEEDED = 2

INSTALL_UPDATES_SCRIPT = """
$session = New-Object -ComObject Microsoft.Update.Session
$searcher = $session.CreateUpdateSearcher()
$result = $searcher.Search("IsInstalled=0 and Type='Software' and IsHidden=0")
if ($result.Updates.Count -eq 0) {
    Write-Output "No updates available"
    exit 0
}
$updates = New-Object -ComObject Microsoft.Update.UpdateColl
foreach ($u in $result.Updates) {
    if (-not $u.EulaAccepted) { $u.AcceptEula() }
    [void]$updates.Add($u)
}
$downloader = $session.CreateUpdateDownloader()
$downloader.Updates = $updates
[void]$downloader.Download()
$installer = $session.CreateUpdateInstaller()
$installer.Updates = $updates
$outcome = $installer.Install()
Write-Output "Installed $($updates.Count) updates (result code $($outcome.ResultCode), reboot required: $($outcome.RebootRequired))"
if ($outcome.ResultCode -ne %d) { exit 1 }
""" % WU_RESULT_SUCCEEDED

class WindowsSystemOperations(SystemOperations):
    def __init__(self, wmi_client=None):
        self._wmi_client = wmi_client

    def _connect(self):
        if self._wmi_client is not None:
            return self._wmi_client
        import pythoncom
        import wmi
        # Re-initialize per call; the service mode calls in from worker threads
        pythoncom.CoInitialize()
        return wmi.WMI()

    def _find_service(self, name: str):
        matches = self._connect().Win32_Service(Name=name)
        return matches[0] if matches else None

    def _run_powershell(self, script: str, timeout: Optional[int] = 30) -> Tuple[bool, str]:
        """
        Helper to run a PowerShell script safely.
        """
        cmd = ["powershell", "-NoProfile", "-NonInteractive", "-Command", script]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=timeout
            )
            success = (result.returncode == 0)
            output = result.stdout + "\n" + result.stderr
            return success, output.strip()
        except subprocess.TimeoutExpired:
            return False, f"Execution timed out after {timeout}s."
        except OSError as e:
            return False, f"Execution failed: {str(e)}"

    @safe_execute(default_return=False)
    def query_service_state(self, name: str) -> bool:
        svc = self._find_service(name)
        if svc is None:
            return False
        return svc.State.lower() == 'running'

    def start_service(self, name: str) -> None:
        svc = self._find_service(name)
        if svc is None:
            raise ServiceControlError(f"Service {name} not found")
        return_value, = svc.StartService()
        if return_value not in (START_OK, START_ALREADY_RUNNING):
            raise ServiceControlError(f"StartService returned {return_value}")

    def is_elevated(self) -> bool:
        try:
            return ctypes.windll.shell32.IsUserAnAdmin() != 0
        except (AttributeError, OSError):
            return False

    def install_updates(self) -> str:
        # Downloads can take far longer than the default script timeout
        success, output = self._run_powershell(INSTALL_UPDATES_SCRIPT, timeout=None)
        if not success:
            raise UpdateError(output or "Windows Update installation failed")
        return output
