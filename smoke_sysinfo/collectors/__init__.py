"""
Package des collecteurs de données pour la sonde

Ce package contient :
- Le collecteur de base (classe abstraite)
- Le collecteur générique basé sur uname
- Les collecteurs spécifiques par plateforme
"""
