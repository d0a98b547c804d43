"""
Module de configuration pour l'agent de relevé de températures

Ce module gère la configuration de l'agent, incluant :
- Lecture des fichiers de configuration
- Validation des paramètres
- Valeurs par défaut
- Sélection de la stratégie d'acquisition
"""

import os
import sys
import configparser
from typing import Dict, Any, List, Optional

from .exceptions import InvalidTemperatureTypeError
from .filter import Filter
from .temperature import TemperatureType


BACKENDS = ('auto', 'lmsensors', 'native')


class HarvestConfig:
    """
    Gestionnaire de configuration pour l'agent de relevé de températures

    Cette classe centralise la configuration du collecteur, de l'unité,
    du filtre de noms et du logging.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialise la configuration de l'agent

        Args:
            config_file: Chemin vers le fichier de configuration (optionnel)
        """
        self.config = configparser.ConfigParser()
        self.config_file = config_file or self._get_default_config_path()

        # Définir les valeurs par défaut
        self._set_defaults()

        # Charger la configuration depuis le fichier
        self._load_config()

    def _get_default_config_path(self) -> str:
        """
        Détermine le chemin par défaut du fichier de configuration selon la plateforme

        Returns:
            str: Chemin vers le fichier de configuration
        """
        if sys.platform == "win32":
            return os.path.join(
                os.environ.get("PROGRAMDATA", "C:\\ProgramData"),
                "TempHarvest",
                "config.ini"
            )
        else:
            return "/etc/tempharvest/config.ini"

    def _set_defaults(self):
        """
        Définit les valeurs de configuration par défaut

        Ces valeurs sont utilisées si aucun fichier de configuration n'est trouvé
        ou si certaines sections/clés sont manquantes.
        """
        # Stratégie d'acquisition
        self.config.add_section('collector')
        self.config.set('collector', 'backend', 'auto')  # auto, lmsensors, native
        self.config.set('collector', 'lmsensors', 'false')
        self.config.set('collector', 'sensors_command', 'sensors')
        self.config.set('collector', 'sensors_args', '-u')
        self.config.set('collector', 'command_timeout', '0')  # 0 = pas de timeout

        # Unité
        self.config.add_section('temperature')
        self.config.set('temperature', 'unit', 'celsius')

        # Filtre de noms
        self.config.add_section('filter')
        self.config.set('filter', 'enabled', 'false')
        self.config.set('filter', 'is_list_ignored', 'true')
        self.config.set('filter', 'list', '')
        self.config.set('filter', 'regex', 'false')
        self.config.set('filter', 'case_sensitive', 'false')
        self.config.set('filter', 'whole_word', 'false')

        # Configuration logging
        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'INFO')
        self.config.set('logging', 'log_file', self._get_default_log_path())
        self.config.set('logging', 'max_log_size', '10485760')  # 10MB
        self.config.set('logging', 'backup_count', '5')

    def _get_default_log_path(self) -> str:
        """
        Détermine le chemin par défaut des logs selon la plateforme

        Returns:
            str: Chemin vers le fichier de log
        """
        if sys.platform == "win32":
            return os.path.join(
                os.environ.get("TEMP", "C:\\temp"),
                "tempharvest.log"
            )
        else:
            return "/tmp/tempharvest.log"

    def _load_config(self):
        """
        Charge la configuration depuis le fichier

        Si le fichier n'existe pas, utilise les valeurs par défaut.
        En cas d'erreur de lecture, signale l'erreur et continue avec les défauts.
        """
        try:
            if os.path.exists(self.config_file):
                self.config.read(self.config_file, encoding='utf-8')
                print(f"Configuration chargée depuis: {self.config_file}", file=sys.stderr)
            else:
                print(f"Fichier de configuration non trouvé: {self.config_file}", file=sys.stderr)
                print("Utilisation des valeurs par défaut", file=sys.stderr)

        except configparser.Error as e:
            print(f"Erreur lors du chargement de la configuration: {e}", file=sys.stderr)
            print("Utilisation des valeurs par défaut", file=sys.stderr)

    def get(self, section: str, option: str, fallback: Any = None) -> str:
        """
        Récupère une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            fallback: Valeur par défaut si non trouvée

        Returns:
            str: Valeur de configuration
        """
        return self.config.get(section, option, fallback=fallback)

    def getboolean(self, section: str, option: str, fallback: bool = False) -> bool:
        return self.config.getboolean(section, option, fallback=fallback)

    def getint(self, section: str, option: str, fallback: int = 0) -> int:
        return self.config.getint(section, option, fallback=fallback)

    def getfloat(self, section: str, option: str, fallback: float = 0.0) -> float:
        return self.config.getfloat(section, option, fallback=fallback)

    def set(self, section: str, option: str, value: Any):
        """
        Définit une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            value: Nouvelle valeur
        """
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, option, str(value))

    def save(self):
        """
        Sauvegarde la configuration dans le fichier

        Crée les dossiers parents si nécessaire.
        """
        config_dir = os.path.dirname(self.config_file)
        if config_dir and not os.path.exists(config_dir):
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            self.config.write(f)

        print(f"Configuration sauvegardée dans: {self.config_file}", file=sys.stderr)

    def get_collector_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration de la stratégie d'acquisition

        Returns:
            dict: Configuration collecteur
        """
        timeout = self.getfloat('collector', 'command_timeout', 0.0)
        return {
            'backend': self.get('collector', 'backend', 'auto').strip().lower(),
            'lmsensors': self.getboolean('collector', 'lmsensors', False),
            'sensors_command': self.get('collector', 'sensors_command', 'sensors'),
            'sensors_args': self.get('collector', 'sensors_args', '-u').split(),
            'command_timeout': timeout if timeout > 0 else None
        }

    def get_filter_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration du filtre de noms

        Returns:
            dict: Configuration filtre
        """
        return {
            'enabled': self.getboolean('filter', 'enabled', False),
            'is_list_ignored': self.getboolean('filter', 'is_list_ignored', True),
            'list': self._split_list(self.get('filter', 'list', '')),
            'regex': self.getboolean('filter', 'regex', False),
            'case_sensitive': self.getboolean('filter', 'case_sensitive', False),
            'whole_word': self.getboolean('filter', 'whole_word', False)
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration du logging

        Returns:
            dict: Configuration logging

        Raises:
            ValueError: Si max_log_size ou backup_count n'est pas un entier
        """
        return {
            'log_level': self.get('logging', 'log_level', 'INFO').strip().upper(),
            'log_file': self.get('logging', 'log_file'),
            'max_log_size': self.getint('logging', 'max_log_size', 10485760),
            'backup_count': self.getint('logging', 'backup_count', 5)
        }

    def get_temperature_type(self) -> TemperatureType:
        """
        Unité configurée

        Raises:
            InvalidTemperatureTypeError: Si l'unité configurée est invalide
        """
        return TemperatureType.from_str(self.get('temperature', 'unit', 'celsius').strip())

    def build_filter(self) -> Optional[Filter]:
        """
        Construit le filtre configuré, ou None s'il est désactivé

        Raises:
            FilterConfigError: Si un motif est invalide
        """
        filter_config = self.get_filter_config()
        if not filter_config['enabled']:
            return None

        return Filter.from_entries(
            filter_config['list'],
            is_list_ignored=filter_config['is_list_ignored'],
            regex=filter_config['regex'],
            case_sensitive=filter_config['case_sensitive'],
            whole_word=filter_config['whole_word']
        )

    @staticmethod
    def _split_list(raw: str) -> List[str]:
        # Entrées séparées par des virgules ou des retours à la ligne
        entries = []
        for line in raw.splitlines():
            entries.extend(part.strip() for part in line.split(','))
        return [entry for entry in entries if entry]

    def validate(self) -> bool:
        """
        Valide la configuration courante

        Returns:
            bool: True si la configuration est valide, False sinon
        """
        errors = []

        backend = self.get('collector', 'backend', 'auto').strip().lower()
        if backend not in BACKENDS:
            errors.append(f"Stratégie d'acquisition invalide (doit être: {', '.join(BACKENDS)})")

        try:
            self.get_temperature_type()
        except InvalidTemperatureTypeError as e:
            errors.append(str(e))

        log_level = self.get('logging', 'log_level', 'INFO').strip().upper()
        if log_level not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
            errors.append("Niveau de log invalide")

        for option in ('max_log_size', 'backup_count'):
            try:
                if self.getint('logging', option) < 0:
                    errors.append(f"Valeur logging.{option} invalide (doit être positive ou nulle)")
            except ValueError:
                errors.append(f"Valeur logging.{option} invalide (doit être un entier)")

        try:
            if self.getfloat('collector', 'command_timeout') < 0:
                errors.append("Timeout de commande invalide (doit être positif ou nul)")
        except ValueError:
            errors.append("Timeout de commande invalide (doit être un nombre)")

        try:
            self.build_filter()
        except ValueError as e:
            errors.append(str(e))

        if errors:
            for error in errors:
                print(f"Erreur de configuration: {error}", file=sys.stderr)
            return False

        return True


def create_default_config(config_path: str) -> HarvestConfig:
    """
    Crée un fichier de configuration par défaut

    Args:
        config_path: Chemin où créer le fichier de configuration

    Returns:
        HarvestConfig: Instance de configuration créée
    """
    config = HarvestConfig(config_path)
    config.save()
    return config
