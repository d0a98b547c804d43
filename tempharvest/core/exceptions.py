"""
Exceptions de l'agent de relevé de températures

Seules les erreurs corrigeables par l'utilisateur (configuration, unité)
remontent à l'appelant. L'absence de matériel ou d'outil n'est pas une erreur.
"""


class HarvestError(Exception):
    """Classe de base de toutes les erreurs du paquet"""


class InvalidTemperatureTypeError(HarvestError, ValueError):
    """Identifiant d'unité de température non reconnu"""


class FilterConfigError(HarvestError, ValueError):
    """Motif de filtre invalide"""


class ConfigurationError(HarvestError):
    """Paramètre de configuration invalide"""
