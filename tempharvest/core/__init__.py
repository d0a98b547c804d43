"""
Module Core - Composants principaux de l'agent

Ce module contient les fonctionnalités de base :
- Types de relevés et unités
- Filtre de noms
- Configuration
- Logging
- Point d'entrée de collecte
"""
