"""
Module Core - Composants principaux de la sonde

Ce module contient les fonctionnalités de base :
- Configuration
- Logging
- Enregistrement SysInfo
- Détection du système et sonde
"""
