"""
Module de configuration pour la sonde

Ce module gère la configuration de la sonde, incluant :
- Lecture du fichier de configuration
- Validation des paramètres
- Valeurs par défaut
- Chemin par défaut selon la plateforme
"""

import os
import sys
import configparser
from typing import Dict, Any, Optional


LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ProbeConfig:
    """
    Gestionnaire de configuration pour la sonde

    Sections :
    - [probe] : détection du système et exécution des commandes
    - [logging] : niveau et fichier de log
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialise la configuration de la sonde

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
                "SmokeSysInfo",
                "config.ini"
            )
        else:
            return "/etc/smoke-sysinfo/config.ini"

    def _set_defaults(self):
        """
        Définit les valeurs de configuration par défaut

        Ces valeurs sont utilisées si aucun fichier de configuration n'est trouvé
        ou si certaines sections/clés sont manquantes.
        """
        # Configuration sonde
        self.config.add_section('probe')
        self.config.set('probe', 'os_name', '')  # vide = détection automatique
        self.config.set('probe', 'command_timeout', '0')  # 0 = pas de limite

        # Configuration logging
        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'WARNING')
        self.config.set('logging', 'log_file', '')
        self.config.set('logging', 'max_log_size', '1048576')  # 1MB
        self.config.set('logging', 'backup_count', '3')

    def _load_config(self):
        """
        Charge la configuration depuis le fichier

        Si le fichier n'existe pas, utilise les valeurs par défaut.
        En cas d'erreur de lecture, signale l'erreur et continue avec les défauts.
        """
        if not os.path.exists(self.config_file):
            return

        try:
            self.config.read(self.config_file, encoding='utf-8')
        except configparser.Error as e:
            print(f"Erreur lors du chargement de la configuration: {e}", file=sys.stderr)
            print("Utilisation des valeurs par défaut", file=sys.stderr)
            self.config = configparser.ConfigParser()
            self._set_defaults()

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

    def getint(self, section: str, option: str, fallback: int = 0) -> int:
        """Récupère une valeur entière de configuration"""
        try:
            return self.config.getint(section, option, fallback=fallback)
        except ValueError:
            return fallback

    def getfloat(self, section: str, option: str, fallback: float = 0.0) -> float:
        """Récupère une valeur décimale de configuration"""
        try:
            return self.config.getfloat(section, option, fallback=fallback)
        except ValueError:
            return fallback

    def set(self, section: str, option: str, value: str):
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

        Raises:
            OSError: Si le fichier ne peut pas être écrit
        """
        config_dir = os.path.dirname(self.config_file)
        if config_dir and not os.path.exists(config_dir):
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            self.config.write(f)

    def get_probe_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration complète de la sonde

        Returns:
            dict: Configuration sonde
        """
        return {
            'os_name': self.get('probe', 'os_name', ''),
            'command_timeout': self.getfloat('probe', 'command_timeout', 0.0)
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration complète du logging

        Returns:
            dict: Configuration logging
        """
        return {
            'log_level': self.get('logging', 'log_level', 'WARNING'),
            'log_file': self.get('logging', 'log_file', ''),
            'max_log_size': self.getint('logging', 'max_log_size', 1048576),
            'backup_count': self.getint('logging', 'backup_count', 3)
        }

    def validate(self) -> bool:
        """
        Valide la configuration courante

        Returns:
            bool: True si la configuration est valide, False sinon
        """
        errors = []

        # Valider le niveau de log
        log_level = self.get('logging', 'log_level', '')
        if log_level.upper() not in LOG_LEVELS:
            errors.append("Niveau de log invalide")

        # Valider le délai des commandes
        try:
            timeout = self.config.getfloat('probe', 'command_timeout', fallback=0.0)
            if timeout < 0:
                errors.append("Délai des commandes invalide (doit être positif ou nul)")
        except ValueError:
            errors.append("Délai des commandes invalide (doit être un nombre)")

        # Valider les paramètres de rotation
        for option in ('max_log_size', 'backup_count'):
            try:
                if self.config.getint('logging', option, fallback=0) < 0:
                    errors.append(f"Paramètre logging.{option} négatif")
            except ValueError:
                errors.append(f"Paramètre logging.{option} invalide (doit être un entier)")

        if errors:
            for error in errors:
                print(f"Erreur de configuration: {error}", file=sys.stderr)
            return False

        return True


# Fonction utilitaire pour créer une configuration par défaut
def create_default_config(config_path: str) -> ProbeConfig:
    """
    Crée un fichier de configuration par défaut

    Args:
        config_path: Chemin où créer le fichier de configuration

    Returns:
        ProbeConfig: Instance de configuration créée
    """
    config = ProbeConfig(config_path)
    config.save()
    return config
