"""
Stratégie d'acquisition basée sur lm-sensors

Ce module exécute `sensors -u` (sortie brute, lisible par machine) et
transforme le texte obtenu en périphériques et capteurs typés. Le format
attendu est une suite de blocs :

    iwlwifi_1-virtual-0
    Adapter: Virtual device
    temp1:
      temp1_input: 39.000

terminés par une ligne vide.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..core.filter import Filter
from ..core.temperature import TempHarvest, TemperatureType, is_finite
from .base import BaseTemperatureCollector


class LmSensorsSensorType(Enum):
    TEMPERATURE = 'temperature'
    FAN = 'fan'
    VOLTAGE = 'voltage'


@dataclass
class LmSensorsSensor:
    name: str
    value: float
    sensor_type: LmSensorsSensorType


@dataclass
class LmSensorsDevice:
    """Périphérique rapporté par lm-sensors (nom, adaptateur, capteurs)"""
    name: str
    adapter: str
    sensors: List[LmSensorsSensor] = field(default_factory=list)


# Évaluées dans l'ordre, la première correspondance l'emporte
SENSOR_TYPE_RULES: Tuple[Tuple[str, LmSensorsSensorType], ...] = (
    ('temp', LmSensorsSensorType.TEMPERATURE),
    ('fan', LmSensorsSensorType.FAN),
)

FRIENDLY_NAME_RULES: Tuple[Tuple[str, str], ...] = (
    ('wifi', 'Wifi'),
    ('gpu', 'Gpu'),
    ('nvidia', 'Gpu'),
    ('it86', 'MB'),
    ('k10', 'CPU'),
    ('kraken', 'AIO'),
    ('nvme', 'Nvme'),
)

ADAPTER_PREFIX = 'Adapter: '

# Valeur retenue quand la mesure n'est pas un nombre fini
UNPARSABLE_VALUE = 0.0


def parse_lm_sensors_sensor_type(token: str) -> LmSensorsSensorType:
    """
    Classe un capteur d'après le premier jeton de sa ligne de valeur

    Args:
        token: Par exemple "temp1_input" ou "fan2_input"

    Returns:
        LmSensorsSensorType: Type du capteur (tension par défaut)
    """
    for needle, sensor_type in SENSOR_TYPE_RULES:
        if needle in token:
            return sensor_type
    return LmSensorsSensorType.VOLTAGE


def format_friendly_names(device_name: str, sensor_name: str) -> str:
    """
    Construit le nom affiché "<libellé>: <capteur>"

    Le libellé provient de FRIENDLY_NAME_RULES (insensible à la casse),
    à défaut du préfixe du nom de périphérique avant le premier '-'.
    """
    lowered = device_name.lower()
    for needle, label in FRIENDLY_NAME_RULES:
        if needle in lowered:
            parent_name = label
            break
    else:
        parent_name = device_name.split('-', 1)[0]

    return f"{parent_name}: {sensor_name}"


def _parse_sensor_value(raw: str) -> float:
    # float() accepte aussi "4_5" et les chiffres Unicode
    if '_' in raw or not raw.isascii():
        return UNPARSABLE_VALUE

    try:
        value = float(raw)
    except ValueError:
        return UNPARSABLE_VALUE

    if not is_finite(value):
        return UNPARSABLE_VALUE
    return value


def _parse_value_line(sensor_name: str, value_line: str) -> Optional[LmSensorsSensor]:
    if 'input' not in value_line:
        return None

    parts = value_line.split()
    if len(parts) != 2:
        return None

    return LmSensorsSensor(
        name=sensor_name,
        value=_parse_sensor_value(parts[1]),
        sensor_type=parse_lm_sensors_sensor_type(parts[0])
    )


def parse_lm_sensors_data(data: str) -> List[LmSensorsDevice]:
    """
    Parse la sortie de `sensors -u`

    Une ligne contenant '-' ouvre un périphérique, la ligne suivante est son
    adaptateur. Jusqu'à la prochaine ligne vide, une ligne finissant par ':'
    nomme un capteur et la ligne qui la suit porte sa valeur. Les lignes qui
    ne correspondent à rien sont ignorées.

    Args:
        data: Sortie texte complète de l'outil

    Returns:
        list: Périphériques dans l'ordre de la sortie
    """
    devices = []
    # Seul \n sépare les lignes, un \r final est retiré
    lines = (line.rstrip('\r') for line in data.split('\n'))

    for line in lines:
        if '-' not in line:
            continue

        adapter = next(lines, '')
        if adapter.startswith(ADAPTER_PREFIX):
            adapter = adapter[len(ADAPTER_PREFIX):]

        device = LmSensorsDevice(name=line, adapter=adapter)

        for sensor_line in lines:
            stripped = sensor_line.strip()
            if not stripped:
                break  # fin de la section du périphérique

            if not stripped.endswith(':'):
                continue

            # La ligne de valeur est consommée même si elle est vide
            value_line = next(lines, None)
            if value_line is None:
                break

            sensor = _parse_value_line(stripped.rstrip(':'), value_line)
            if sensor is not None:
                device.sensors.append(sensor)

        devices.append(device)

    return devices


class LmSensorsCollector(BaseTemperatureCollector):
    """
    Stratégie texte : lance lm-sensors et parse sa sortie

    Utilisée sur les systèmes de type Unix quand la fonctionnalité
    lmsensors est demandée.
    """

    backend_name = 'lmsensors'

    def __init__(self, config, logger):
        super().__init__(config, logger)

        if config is not None:
            collector_config = config.get_collector_config()
            self.sensors_command = collector_config['sensors_command']
            self.sensors_args = collector_config['sensors_args']
            self.command_timeout = collector_config['command_timeout']
        else:
            self.sensors_command = 'sensors'
            self.sensors_args = ['-u']
            self.command_timeout = None

    def is_supported(self) -> bool:
        return sys.platform != 'win32'

    def get_lm_sensor_data(self) -> List[LmSensorsDevice]:
        """
        Exécute l'outil et parse sa sortie

        Returns:
            list: Périphériques trouvés, vide si l'outil est indisponible
        """
        if not self.is_supported():
            return []

        output = self._execute_command(
            [self.sensors_command] + list(self.sensors_args),
            timeout=self.command_timeout
        )
        if output is None:
            self.logger.debug("lm-sensors indisponible, aucun périphérique")
            return []

        return parse_lm_sensors_data(output)

    def collect(self, temp_type: TemperatureType = TemperatureType.CELSIUS,
                temp_filter: Optional[Filter] = None) -> Optional[List[TempHarvest]]:
        self._start_collection()

        temperatures = []
        for device in self.get_lm_sensor_data():
            for sensor in device.sensors:
                if sensor.sensor_type is not LmSensorsSensorType.TEMPERATURE:
                    continue

                if not Filter.optional_should_keep(temp_filter, sensor.name):
                    continue

                temperature = temp_type.convert_temp_unit(sensor.value)
                if not is_finite(temperature):
                    temperature = UNPARSABLE_VALUE

                temperatures.append(TempHarvest(
                    name=format_friendly_names(device.name, sensor.name),
                    temperature=temperature
                ))

        self._end_collection(len(temperatures))
        return temperatures
