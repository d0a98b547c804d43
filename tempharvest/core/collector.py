"""
Module collecteur principal pour l'agent de relevé de températures

Ce module :
- Sélectionne au démarrage l'unique stratégie d'acquisition active
- Expose le point d'entrée de collecte commun à toutes les stratégies
"""

import sys
from typing import List, Optional

from ..collectors.base import BaseTemperatureCollector
from ..collectors.lm_sensors import LmSensorsCollector
from ..collectors.platform.native import NativeCollector
from .exceptions import ConfigurationError
from .filter import Filter
from .logger import get_logger
from .temperature import TempHarvest, TemperatureType


def _is_unix_like() -> bool:
    return sys.platform != 'win32'


def select_collector(config, logger) -> BaseTemperatureCollector:
    """
    Choisit la stratégie d'acquisition à partir de la configuration

    `auto` retient lm-sensors seulement si la fonctionnalité lmsensors est
    activée sur un système de type Unix, la stratégie native sinon.

    Args:
        config: Instance de HarvestConfig (None = valeurs par défaut)
        logger: Instance de HarvestLogger

    Returns:
        BaseTemperatureCollector: Stratégie retenue

    Raises:
        ConfigurationError: Si la stratégie configurée est inconnue
    """
    if config is not None:
        collector_config = config.get_collector_config()
        backend = collector_config['backend']
        lmsensors_enabled = collector_config['lmsensors']
    else:
        backend = 'auto'
        lmsensors_enabled = False

    if backend == 'auto':
        backend = 'lmsensors' if lmsensors_enabled and _is_unix_like() else 'native'

    if backend == 'lmsensors':
        return LmSensorsCollector(config, logger)
    elif backend == 'native':
        return NativeCollector(config, logger)

    raise ConfigurationError(
        f"Stratégie d'acquisition inconnue: '{backend}' (attendu: auto, lmsensors, native)"
    )


class TemperatureCollector:
    """
    Point d'entrée de la collecte de températures

    La stratégie est fixée à la construction et n'est jamais remplacée.
    Chaque appel à collect() effectue une acquisition indépendante.
    """

    def __init__(self, config=None, logger=None):
        """
        Args:
            config: Instance de HarvestConfig
            logger: Instance de HarvestLogger
        """
        self.config = config
        self.logger = logger if logger is not None else get_logger()
        self._backend = select_collector(config, self.logger)

        self.logger.info(f"Stratégie d'acquisition: {self._backend.backend_name}")

    @property
    def backend_name(self) -> str:
        return self._backend.backend_name

    @property
    def backend(self) -> BaseTemperatureCollector:
        return self._backend

    def collect(self, temp_type: TemperatureType = TemperatureType.CELSIUS,
                temp_filter: Optional[Filter] = None) -> Optional[List[TempHarvest]]:
        """
        Lance une acquisition avec la stratégie active

        Args:
            temp_type: Unité des valeurs renvoyées
            temp_filter: Filtre de noms optionnel, appliqué avant formatage

        Returns:
            list: Relevés de température, vide si aucun capteur n'est disponible
        """
        return self._backend.collect(temp_type, temp_filter)


def get_temperature_data(temp_type: TemperatureType = TemperatureType.CELSIUS,
                         temp_filter: Optional[Filter] = None,
                         config=None, logger=None) -> Optional[List[TempHarvest]]:
    """Collecte ponctuelle sans conserver de collecteur"""
    return TemperatureCollector(config, logger).collect(temp_type, temp_filter)
