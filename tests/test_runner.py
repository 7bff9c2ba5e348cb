import re

import pytest

from core.cleaner import Cleaner
from core.models import MaintenanceConfig
from core.runner import END_BANNER, START_BANNER, MaintenanceRunner
from conftest import CaptureLog, FakeMonitor, FakeOps

def make_runner(config, log, monitor=None, ops=None, temp_dir=None):
    ops = ops or FakeOps()
    cleaner = Cleaner(config, ops, log, temp_dir=temp_dir)
    return MaintenanceRunner(config, log, monitor or FakeMonitor(), ops, cleaner=cleaner)

def kinds(messages):
    # Strip numbers so only the kind of line remains
    return [re.sub(r'\d+(\.\d+)?', 'N', m) for m in messages]

def test_steps_run_in_order(log_files, capture_log, empty_temp):
    make_runner(log_files, capture_log, temp_dir=empty_temp).run()
    messages = capture_log.messages

    assert messages[0] == START_BANNER
    assert messages[-1] == END_BANNER
    order = [
        next(i for i, m in enumerate(messages) if m.startswith("📊")),
        next(i for i, m in enumerate(messages) if m.startswith("🔍")),
        next(i for i, m in enumerate(messages) if m.startswith("🧹")),
        next(i for i, m in enumerate(messages) if "Service wuauserv" in m),
        next(i for i, m in enumerate(messages) if "Administrator privileges" in m),
    ]
    assert order == sorted(order)

def test_service_failure_does_not_stop_updates(log_files, capture_log, empty_temp):
    ops = FakeOps(stopped={'BITS'}, start_failures={'BITS'}, elevated=True)
    make_runner(log_files, capture_log, ops=ops, temp_dir=empty_temp).run()
    assert ops.install_calls == 1
    assert capture_log.messages[-1] == END_BANNER

def test_update_failure_still_completes(log_files, capture_log, empty_temp):
    ops = FakeOps(elevated=True, update_error="boom")
    make_runner(log_files, capture_log, ops=ops, temp_dir=empty_temp).run()
    assert capture_log.containing("Update installation failed: boom")
    assert capture_log.messages[-1] == END_BANNER

def test_missing_log_file_ends_the_run(config, capture_log, empty_temp):
    ops = FakeOps(elevated=True)
    with pytest.raises(FileNotFoundError):
        make_runner(config, capture_log, ops=ops, temp_dir=empty_temp).run()
    assert END_BANNER not in capture_log.messages
    assert ops.install_calls == 0

def test_stopped_service_scenario(log_files, capture_log, empty_temp):
    ops = FakeOps(stopped={'Spooler'})
    make_runner(log_files, capture_log, ops=ops, temp_dir=empty_temp).run()

    spooler = [m for m in capture_log.messages if "Spooler" in m]
    assert spooler == [
        "⚠️ Service Spooler is not running",
        "🔄 Attempting to start service Spooler",
        "✅ Service Spooler started successfully",
    ]

def test_disk_breach_scenario(log_files, capture_log, empty_temp):
    config = MaintenanceConfig(log_dir=log_files.log_dir, disk_threshold=80)
    make_runner(config, capture_log, monitor=FakeMonitor(disk=85.0), temp_dir=empty_temp).run()
    disk = capture_log.containing("Disk usage exceeds threshold")
    assert len(disk) == 1 and "85%" in disk[0]

def test_two_runs_produce_same_line_kinds(log_files, empty_temp):
    with open(log_files.auth_log_path, 'w') as f:
        f.write("Failed password\n" * 7)

    first, second = CaptureLog(), CaptureLog()
    make_runner(log_files, first, temp_dir=empty_temp).run()
    make_runner(log_files, second, temp_dir=empty_temp).run()

    assert kinds(first.messages) == kinds(second.messages)
    assert len(first.containing("🚨")) == 1
