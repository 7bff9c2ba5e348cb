import atexit
import dataclasses
import platform
import threading

from flask import Flask, jsonify, request
from apscheduler.schedulers.background import BackgroundScheduler

from core.executor_base import get_system_operations
from core.logger import read_log_entries
from core.models import load_config
from core.monitor_base import get_monitor
from core.runner import MaintenanceRunner
from core.workspace import bootstrap, prepare_placeholder_logs
import config as settings

def create_app(config=None, monitor=None, ops=None, log=None, start_scheduler=True):
    config = config or load_config()
    monitor = monitor or get_monitor()
    ops = ops or get_system_operations(config.environment)
    log = log or bootstrap(config)

    app = Flask(__name__)
    # One run at a time, whether triggered by the scheduler or over HTTP
    run_lock = threading.Lock()

    def run_maintenance_job():
        if not run_lock.acquire(blocking=False):
            app.logger.info("Maintenance run already in progress; skipping.")
            return False
        try:
            # Input logs may have been rotated away since the last run
            prepare_placeholder_logs(config, log)
            MaintenanceRunner(config, log, monitor, ops).run()
            return True
        except Exception:
            app.logger.exception("Maintenance run failed")
            raise
        finally:
            run_lock.release()

    app.config['RUN_MAINTENANCE'] = run_maintenance_job

    @app.route('/api/health')
    def api_health():
        snapshot = monitor.get_resource_snapshot()
        return jsonify(dataclasses.asdict(snapshot))

    @app.route('/api/run', methods=['POST'])
    def api_run():
        if not run_maintenance_job():
            return jsonify({'status': 'busy'}), 409
        return jsonify({'status': 'completed'})

    @app.route('/api/log')
    def api_log():
        try:
            limit = int(request.args.get('limit', 100))
        except ValueError:
            return jsonify({'status': 'error', 'message': 'limit must be an integer'}), 400
        entries = read_log_entries(config.log_path, limit=max(limit, 1))
        return jsonify([dataclasses.asdict(e) for e in entries])

    @app.route('/api/settings', methods=['GET'])
    def get_settings():
        return jsonify(dataclasses.asdict(config))

    if start_scheduler:
        scheduler = BackgroundScheduler()
        scheduler.add_job(func=run_maintenance_job, trigger="interval",
                          hours=config.schedule_interval_hours)
        scheduler.start()
        app.config['SCHEDULER'] = scheduler
        atexit.register(lambda: scheduler.shutdown())

    return app

if __name__ == '__main__':
    app = create_app()
    print("Maintenance service started")
    print(f"Platform: {platform.system()}")
    app.run(host=getattr(settings, 'API_HOST', '127.0.0.1'),
            port=getattr(settings, 'API_PORT', 5000))
