"""
Stratégie d'acquisition native via psutil

psutil lit directement les interfaces du système (hwmon sous Linux,
sysctl sous FreeBSD). Sur les plateformes où psutil ne fournit pas
de capteurs de température, la collecte renvoie une liste vide.
"""

from typing import List, Optional

import psutil

from ...core.filter import Filter
from ...core.temperature import TempHarvest, TemperatureType, is_finite
from ..base import BaseTemperatureCollector


class NativeCollector(BaseTemperatureCollector):
    """
    Stratégie native basée sur psutil.sensors_temperatures()
    """

    backend_name = 'native'

    def is_supported(self) -> bool:
        return hasattr(psutil, 'sensors_temperatures')

    def collect(self, temp_type: TemperatureType = TemperatureType.CELSIUS,
                temp_filter: Optional[Filter] = None) -> Optional[List[TempHarvest]]:
        self._start_collection()

        if not self.is_supported():
            self.logger.debug("psutil ne fournit pas de capteurs de température sur cette plateforme")
            self._end_collection(0)
            return []

        try:
            sensors = psutil.sensors_temperatures(fahrenheit=False)
        except (OSError, RuntimeError) as e:
            self.logger.warning(f"Erreur lecture des capteurs psutil: {e}")
            self._end_collection(0)
            return []

        temperatures = []
        for chip, entries in (sensors or {}).items():
            for entry in entries:
                name = f"{chip}: {entry.label or chip}"
                if not Filter.optional_should_keep(temp_filter, name):
                    continue

                current = entry.current
                temperature = None
                if is_finite(current):
                    temperature = temp_type.convert_temp_unit(float(current))
                    if not is_finite(temperature):
                        temperature = None

                temperatures.append(TempHarvest(name=name, temperature=temperature))

        self._end_collection(len(temperatures))
        return temperatures
