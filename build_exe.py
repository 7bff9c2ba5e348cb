import os
import sys
import platform
import subprocess
import shutil

APP_NAME = "WinMaintenance"

def build_command(system: str):
    cmd = [
        "pyinstaller",
        f"--name={APP_NAME}",
        "--onefile",  # Single executable
        "--clean",
        "--noconfirm",
        "--console",  # The run reports through stdout
        # Platform modules are imported lazily by the factories
        "--hidden-import", "platforms.windows.monitor_windows",
        "--hidden-import", "platforms.windows.executor_windows",
        "--hidden-import", "platforms.mac.monitor_mac",
        "--hidden-import", "platforms.mac.executor_mac",
    ]
    if system == 'Windows':
        # Updates are only installed from an elevated process
        cmd.append("--uac-admin")
    cmd.append("maintenance.py")
    return cmd

def build():
    print("🚀 Starting maintenance runner build...")

    # 1. Clean previous builds
    if os.path.exists('build'):
        shutil.rmtree('build')
    if os.path.exists('dist'):
        shutil.rmtree('dist')
    if os.path.exists(f'{APP_NAME}.spec'):
        os.remove(f'{APP_NAME}.spec')

    system = platform.system()
    cmd = build_command(system)

    if system != 'Windows':
        # On Mac/Linux, calling the binary directly from venv
        pyinstaller_path = os.path.join("venv", "bin", "pyinstaller")
        if os.path.exists(pyinstaller_path):
            cmd[0] = pyinstaller_path

    print(f"📦 Packaging for {system}...")
    print(f"   Command: {' '.join(cmd)}")

    # 2. Run PyInstaller
    try:
        subprocess.check_call(cmd)
        print("\n✅ Build Successful!")
        print(f"   Executable is located in: {os.path.abspath('dist')}")
    except subprocess.CalledProcessError as e:
        print(f"\n❌ Build Failed: {e}")
        sys.exit(1)

if __name__ == "__main__":
    build()
