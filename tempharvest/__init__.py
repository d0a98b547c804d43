"""
TempHarvest - Relevés de températures matérielles multi-plateforme

Ce module principal fournit un collecteur qui récupère les températures
des capteurs matériels (via lm-sensors ou l'API native du système) et
les normalise dans l'unité demandée.
"""

__version__ = "1.0.0"

# Imports principaux pour faciliter l'utilisation
from .core.collector import TemperatureCollector, get_temperature_data
from .core.config import HarvestConfig
from .core.filter import Filter
from .core.logger import HarvestLogger
from .core.temperature import TempHarvest, TemperatureType, convert

__all__ = [
    'TemperatureCollector', 'get_temperature_data', 'HarvestConfig', 'Filter',
    'HarvestLogger', 'TempHarvest', 'TemperatureType', 'convert'
]
