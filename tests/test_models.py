import dataclasses
import types

import pytest

from core.error_handling import ConfigError
from core.models import MaintenanceConfig, load_config

def test_config_is_immutable():
    config = MaintenanceConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.cpu_threshold = 99

def test_service_list_is_frozen_in_order():
    config = MaintenanceConfig(critical_services=['b', 'a', 'c'])
    assert config.critical_services == ('b', 'a', 'c')

@pytest.mark.parametrize('field', ['cpu_threshold', 'memory_threshold', 'disk_threshold'])
@pytest.mark.parametrize('value', [-1, 100.5])
def test_threshold_out_of_range_rejected(field, value):
    with pytest.raises(ConfigError):
        MaintenanceConfig(**{field: value})

def test_load_config_from_module():
    module = types.SimpleNamespace(
        CRITICAL_SERVICES=['Spooler'],
        CPU_THRESHOLD=70,
        DISK_THRESHOLD=90,
        LOG_DIR='var',
        ENVIRONMENT='dev',
    )
    config = load_config(module)
    assert config.critical_services == ('Spooler',)
    assert config.cpu_threshold == 70.0
    assert config.disk_threshold == 90.0
    assert config.memory_threshold == 85.0
    assert config.environment == 'dev'
    assert config.log_path.startswith('var')

def test_load_config_defaults_from_config_module():
    import config as settings
    config = load_config()
    assert config.critical_services == tuple(settings.CRITICAL_SERVICES)
    assert config.temp_max_age_days == 7
    assert config.failed_login_pattern == 'Failed password'
