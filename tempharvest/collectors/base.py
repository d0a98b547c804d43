"""
Classe de base pour toutes les stratégies d'acquisition de températures

Ce module définit l'interface commune que chaque stratégie
doit implémenter, ainsi que des utilitaires partagés.
"""

import subprocess
import time
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

from ..core.filter import Filter
from ..core.temperature import TempHarvest, TemperatureType


class BaseTemperatureCollector(ABC):
    """
    Classe de base abstraite pour toutes les stratégies d'acquisition

    Une seule stratégie est active par exécution. Chacune produit des
    relevés TempHarvest déjà filtrés et convertis dans l'unité demandée.
    """

    backend_name = 'base'

    def __init__(self, config, logger):
        """
        Initialise le collecteur de base

        Args:
            config: Instance de HarvestConfig
            logger: Instance de HarvestLogger (ou logging.Logger)
        """
        self.config = config
        self.logger = logger

        # Métadonnées du collecteur
        self.collector_name = self.__class__.__name__
        self.collection_start_time = None
        self.last_collection_duration = 0.0
        self.last_record_count = 0

    @abstractmethod
    def collect(self, temp_type: TemperatureType = TemperatureType.CELSIUS,
                temp_filter: Optional[Filter] = None) -> Optional[List[TempHarvest]]:
        """
        Effectue une acquisition synchrone

        Args:
            temp_type: Unité des valeurs renvoyées
            temp_filter: Filtre de noms optionnel

        Returns:
            list: Relevés de température (vide si aucun capteur)
        """

    def is_supported(self) -> bool:
        """Indique si la stratégie peut fonctionner sur cette plateforme"""
        return True

    def _start_collection(self):
        self.collection_start_time = time.time()
        self.logger.debug(f"Début collecte {self.collector_name}")

    def _end_collection(self, record_count: int) -> float:
        """
        Termine une session de collecte

        Args:
            record_count: Nombre de relevés produits

        Returns:
            float: Durée de collecte en secondes
        """
        self.last_record_count = record_count
        if self.collection_start_time:
            duration = time.time() - self.collection_start_time
            self.last_collection_duration = duration
            self.logger.debug(
                f"Collecte {self.collector_name} terminée en {duration:.2f}s "
                f"({record_count} relevé(s))"
            )
            return duration
        return 0.0

    def _execute_command(self, args: List[str], timeout: Optional[float] = None) -> Optional[str]:
        """
        Exécute un programme externe et retourne sa sortie standard

        Le programme est lancé sans shell. Toute défaillance (programme absent,
        code de retour non nul, timeout, sortie non décodable en UTF-8) donne None.

        Args:
            args: Programme et arguments
            timeout: Timeout en secondes (None = attente illimitée)

        Returns:
            str: Sortie de la commande ou None en cas d'erreur
        """
        command = ' '.join(args)
        try:
            result = subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=timeout
            )
        except FileNotFoundError:
            self.logger.debug(f"Programme introuvable: {args[0]}")
            return None
        except subprocess.TimeoutExpired:
            self.logger.warning(f"Timeout pour la commande: {command}")
            return None
        except OSError as e:
            self.logger.warning(f"Erreur lors de l'exécution de '{command}': {e}")
            return None

        if result.returncode != 0:
            self.logger.warning(f"Commande échouée: {command} (code: {result.returncode})")
            return None

        try:
            return result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            self.logger.warning(f"Sortie non décodable pour '{command}': {e}")
            return None

    def get_collection_stats(self) -> Dict[str, Any]:
        """
        Retourne les statistiques de la dernière collecte

        Returns:
            dict: Statistiques du collecteur
        """
        return {
            'collector_name': self.collector_name,
            'backend': self.backend_name,
            'collection_duration': self.last_collection_duration,
            'record_count': self.last_record_count
        }
