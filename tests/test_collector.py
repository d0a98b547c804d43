"""
Tests de la sélection de stratégie et du point d'entrée de collecte
"""

import sys

import pytest

from tempharvest.collectors.lm_sensors import LmSensorsCollector
from tempharvest.collectors.platform.native import NativeCollector
from tempharvest.core.collector import TemperatureCollector, get_temperature_data, select_collector
from tempharvest.core.exceptions import ConfigurationError
from tempharvest.core.filter import Filter
from tempharvest.core.temperature import TempHarvest, TemperatureType

from .conftest import SENSORS_OUTPUT


class TestSelectCollector:

    def test_default_is_native(self, config, logger):
        assert isinstance(select_collector(config, logger), NativeCollector)

    def test_without_config(self, logger):
        assert isinstance(select_collector(None, logger), NativeCollector)

    def test_lmsensors_feature_on_unix(self, config, logger, monkeypatch):
        monkeypatch.setattr('tempharvest.core.collector._is_unix_like', lambda: True)
        config.set('collector', 'lmsensors', 'true')

        assert isinstance(select_collector(config, logger), LmSensorsCollector)

    def test_lmsensors_feature_on_windows(self, config, logger, monkeypatch):
        monkeypatch.setattr('tempharvest.core.collector._is_unix_like', lambda: False)
        config.set('collector', 'lmsensors', 'true')

        assert isinstance(select_collector(config, logger), NativeCollector)

    @pytest.mark.parametrize('backend, expected', [
        ('lmsensors', LmSensorsCollector),
        ('native', NativeCollector),
        ('Native', NativeCollector),
    ])
    def test_explicit_backend(self, config, logger, backend, expected):
        config.set('collector', 'backend', backend)

        assert isinstance(select_collector(config, logger), expected)

    def test_unknown_backend(self, config, logger):
        config.set('collector', 'backend', 'sysinfo')

        with pytest.raises(ConfigurationError):
            select_collector(config, logger)


@pytest.mark.skipif(sys.platform == 'win32', reason="lm-sensors n'est pas utilisé sous Windows")
class TestTemperatureCollector:

    @pytest.fixture
    def lm_config(self, config):
        config.set('collector', 'backend', 'lmsensors')
        return config

    def test_backend_is_bound_once(self, lm_config, logger):
        collector = TemperatureCollector(lm_config, logger)
        backend = collector.backend

        lm_config.set('collector', 'backend', 'native')

        assert collector.backend is backend
        assert collector.backend_name == 'lmsensors'

    def test_collect(self, lm_config, logger, fake_run):
        fake_run(SENSORS_OUTPUT)
        collector = TemperatureCollector(lm_config, logger)

        records = collector.collect(TemperatureType.KELVIN, Filter.from_entries(['Tctl'], is_list_ignored=False))

        assert records == [TempHarvest('CPU: Tctl', pytest.approx(325.775))]

    def test_missing_tool_is_not_an_error(self, lm_config, logger, fake_run):
        fake_run(error=FileNotFoundError())

        assert get_temperature_data(TemperatureType.CELSIUS, None, lm_config, logger) == []

    def test_filter_rejecting_everything(self, lm_config, logger, fake_run):
        fake_run(SENSORS_OUTPUT)
        reject_all = Filter.from_entries([], is_list_ignored=False)

        assert get_temperature_data(TemperatureType.CELSIUS, reject_all, lm_config, logger) == []
