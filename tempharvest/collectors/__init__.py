"""
Package des stratégies d'acquisition de températures

Ce package contient :
- La stratégie de base (classe abstraite)
- La stratégie texte basée sur lm-sensors
- Les stratégies natives par plateforme
"""
