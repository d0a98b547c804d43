"""
Package des stratégies natives par plateforme

Ces stratégies interrogent directement les API du système
d'exploitation au lieu d'un outil en ligne de commande.
"""
