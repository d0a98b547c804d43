"""
Types de base pour les relevés de température

Ce module définit :
- L'enregistrement normalisé TempHarvest renvoyé par toutes les stratégies
- L'unité de température demandée par l'appelant (TemperatureType)
- La conversion depuis les degrés Celsius
"""

import math
from enum import Enum
from typing import Dict, Any, Optional

from .exceptions import InvalidTemperatureTypeError


VALID_TEMPERATURE_TOKENS = "[kelvin, k, celsius, c, fahrenheit, f]"


class TempHarvest:
    """
    Relevé de température nommé, prêt pour l'affichage

    Attributes:
        name: Nom du capteur déjà combiné avec le libellé du périphérique
        temperature: Valeur dans l'unité demandée, None si aucune lecture
    """

    __slots__ = ('name', 'temperature')

    def __init__(self, name: str, temperature: Optional[float] = None):
        self.name = name
        self.temperature = temperature

    def to_dict(self) -> Dict[str, Any]:
        """Sérialise le relevé pour une sortie JSON"""
        return {
            'name': self.name,
            'temperature': self.temperature
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, TempHarvest):
            return NotImplemented
        return self.name == other.name and self.temperature == other.temperature

    def __repr__(self) -> str:
        return f"TempHarvest(name={self.name!r}, temperature={self.temperature!r})"


class TemperatureType(Enum):
    """
    Unité de température demandée par l'appelant

    La conversion est une fonction pure de l'unité et d'une valeur en Celsius.
    """

    CELSIUS = 'celsius'
    KELVIN = 'kelvin'
    FAHRENHEIT = 'fahrenheit'

    @classmethod
    def default(cls) -> 'TemperatureType':
        return cls.CELSIUS

    @classmethod
    def from_str(cls, token: str) -> 'TemperatureType':
        """
        Parse un identifiant d'unité fourni par l'utilisateur

        La comparaison est sensible à la casse.

        Args:
            token: "fahrenheit", "f", "kelvin", "k", "celsius" ou "c"

        Returns:
            TemperatureType: Unité correspondante

        Raises:
            InvalidTemperatureTypeError: Si l'identifiant n'est pas reconnu
        """
        if token in ('fahrenheit', 'f'):
            return cls.FAHRENHEIT
        elif token in ('kelvin', 'k'):
            return cls.KELVIN
        elif token in ('celsius', 'c'):
            return cls.CELSIUS

        raise InvalidTemperatureTypeError(
            f"'{token}' is an invalid temperature type, use one of: {VALID_TEMPERATURE_TOKENS}."
        )

    @property
    def symbol(self) -> str:
        """Symbole d'affichage de l'unité"""
        return {
            TemperatureType.CELSIUS: '°C',
            TemperatureType.KELVIN: 'K',
            TemperatureType.FAHRENHEIT: '°F'
        }[self]

    def convert_temp_unit(self, temp_celsius: float) -> float:
        """
        Convertit une température en Celsius vers cette unité

        Args:
            temp_celsius: Température en degrés Celsius

        Returns:
            float: Température dans l'unité courante
        """
        if self is TemperatureType.KELVIN:
            return temp_celsius + 273.15
        elif self is TemperatureType.FAHRENHEIT:
            return (temp_celsius * (9.0 / 5.0)) + 32.0
        return temp_celsius


def convert(unit: TemperatureType, celsius: float) -> float:
    """Convertit `celsius` vers `unit`"""
    return unit.convert_temp_unit(celsius)


def is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)
