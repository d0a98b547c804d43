"""
Tests de la configuration
"""

import pytest

from tempharvest.core.config import HarvestConfig, create_default_config
from tempharvest.core.exceptions import InvalidTemperatureTypeError
from tempharvest.core.temperature import TemperatureType


CONFIG_FILE = """\
[collector]
backend = lmsensors
sensors_command = /opt/lm/bin/sensors
command_timeout = 5

[temperature]
unit = f

[filter]
enabled = true
is_list_ignored = false
list = Tctl,
    Composite
whole_word = true
"""


class TestHarvestConfig:

    def test_defaults(self, config):
        collector_config = config.get_collector_config()

        assert collector_config == {
            'backend': 'auto',
            'lmsensors': False,
            'sensors_command': 'sensors',
            'sensors_args': ['-u'],
            'command_timeout': None
        }
        assert config.get_temperature_type() is TemperatureType.CELSIUS
        assert config.build_filter() is None
        assert config.validate()

    def test_load_file(self, tmp_path):
        path = tmp_path / 'config.ini'
        path.write_text(CONFIG_FILE, encoding='utf-8')

        config = HarvestConfig(str(path))

        collector_config = config.get_collector_config()
        assert collector_config['backend'] == 'lmsensors'
        assert collector_config['sensors_command'] == '/opt/lm/bin/sensors'
        assert collector_config['sensors_args'] == ['-u']
        assert collector_config['command_timeout'] == 5.0
        assert config.get_temperature_type() is TemperatureType.FAHRENHEIT

        temp_filter = config.build_filter()
        assert temp_filter is not None
        assert not temp_filter.is_list_ignored
        assert temp_filter.should_keep('Tctl')
        assert temp_filter.should_keep('Composite')
        assert not temp_filter.should_keep('Tctl2')

    def test_invalid_unit(self, config):
        config.set('temperature', 'unit', 'bogus')

        with pytest.raises(InvalidTemperatureTypeError):
            config.get_temperature_type()
        assert not config.validate()

    def test_invalid_backend(self, config):
        config.set('collector', 'backend', 'heim')

        assert not config.validate()

    def test_invalid_filter(self, config):
        config.set('filter', 'enabled', 'true')
        config.set('filter', 'regex', 'true')
        config.set('filter', 'list', 'temp(')

        assert not config.validate()

    def test_negative_timeout(self, config):
        config.set('collector', 'command_timeout', '-1')

        assert not config.validate()
        assert config.get_collector_config()['command_timeout'] is None

    def test_create_default_config(self, tmp_path):
        path = tmp_path / 'etc' / 'config.ini'

        create_default_config(str(path))

        assert path.exists()
        reloaded = HarvestConfig(str(path))
        assert reloaded.get('collector', 'backend') == 'auto'
        assert reloaded.get('temperature', 'unit') == 'celsius'

    def test_lowercase_log_level(self, config):
        config.set('logging', 'log_level', 'debug')

        assert config.validate()
        assert config.get_logging_config()['log_level'] == 'DEBUG'

    @pytest.mark.parametrize('option', ['max_log_size', 'backup_count'])
    def test_non_integer_logging_option(self, config, option):
        config.set('logging', option, 'ten')

        assert not config.validate()
        with pytest.raises(ValueError):
            config.get_logging_config()
