"""
Module de logging pour la sonde

Ce module fournit un système de logging centralisé avec :
- Rotation automatique du fichier de log (optionnel)
- Différents niveaux de log
- Formatage cohérent
- Sortie console sur stderr, pour ne pas mélanger les logs au rapport
"""

import os
import sys
import logging
import logging.handlers


LOGGER_NAME = 'SmokeSysInfo'


class ProbeLogger:
    """
    Gestionnaire de logging pour la sonde

    Cette classe configure le logger de l'application. En usage
    bibliothèque, la sonde se contente de get_logger() et laisse
    l'application appelante configurer les handlers.
    """

    def __init__(self, config=None, level: str = None):
        """
        Initialise le système de logging

        Args:
            config: Instance de ProbeConfig pour récupérer les paramètres de log
            level: Niveau imposé (prioritaire sur la configuration)
        """
        self.config = config
        self.logger = logging.getLogger(LOGGER_NAME)

        # Éviter la duplication si déjà configuré
        if not self.logger.handlers:
            self._setup_logging(level)
        elif level:
            self._set_level(level)

    def _setup_logging(self, level: str = None):
        """
        Configure le système de logging avec les handlers appropriés

        Configure :
        - Le niveau de log basé sur la configuration
        - La rotation du fichier de log s'il est configuré
        - La sortie console
        """
        if self.config:
            logging_config = self.config.get_logging_config()
        else:
            logging_config = {
                'log_level': 'WARNING',
                'log_file': '',
                'max_log_size': 1048576,  # 1MB
                'backup_count': 3
            }

        log_level = self._set_level(level or logging_config['log_level'])

        # Handler pour fichier avec rotation
        log_file = logging_config['log_file']
        if log_file:
            formatter = logging.Formatter(
                fmt='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            try:
                log_dir = os.path.dirname(log_file)
                if log_dir and not os.path.exists(log_dir):
                    os.makedirs(log_dir, exist_ok=True)

                file_handler = logging.handlers.RotatingFileHandler(
                    filename=log_file,
                    maxBytes=logging_config['max_log_size'],
                    backupCount=logging_config['backup_count'],
                    encoding='utf-8'
                )
                file_handler.setLevel(log_level)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

            except OSError as e:
                print(f"Erreur lors de la configuration du logging fichier: {e}", file=sys.stderr)

        # Handler pour la console
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(fmt='%(levelname)s - %(message)s'))
        self.logger.addHandler(console_handler)

        self.logger.debug("Système de logging initialisé")
        if log_file:
            self.logger.debug(f"Fichier de log: {log_file}")

    def _set_level(self, level_name: str) -> int:
        """
        Applique un niveau de log au logger et à ses handlers

        Args:
            level_name: Nom du niveau (DEBUG, INFO...)

        Returns:
            int: Constante logging correspondante
        """
        log_level = getattr(logging, str(level_name).upper(), logging.WARNING)
        self.logger.setLevel(log_level)
        for handler in self.logger.handlers:
            handler.setLevel(log_level)
        return log_level

    def debug(self, message: str):
        """Log un message de niveau DEBUG"""
        self.logger.debug(message)

    def info(self, message: str):
        """Log un message de niveau INFO"""
        self.logger.info(message)

    def warning(self, message: str):
        """Log un message de niveau WARNING"""
        self.logger.warning(message)

    def exception(self, message: str):
        """Log une exception avec sa stack trace"""
        self.logger.exception(message)

    def log_probe_info(self, probe):
        """
        Log le résultat d'une sonde

        Args:
            probe: Instance de SysInfoProbe
        """
        self.info(f"Système détecté: {probe.os_name} ({probe.collector_name})")
        for key, value in probe.info.as_dict().items():
            self.info(f"{key}: {value}")

        for error in probe.collection_errors:
            self.warning(f"Erreur de collecte: {error}")

    def log_config_info(self, config):
        """
        Log les informations de configuration

        Args:
            config: Instance de ProbeConfig
        """
        self.debug("=== Configuration de la sonde ===")
        self.debug(f"Fichier: {config.config_file}")

        for key, value in config.get_probe_config().items():
            self.debug(f"Probe.{key}: {value}")

        for key, value in config.get_logging_config().items():
            self.debug(f"Logging.{key}: {value}")

        self.debug("=== Fin configuration ===")


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Fonction utilitaire pour récupérer un logger nommé

    Args:
        name: Nom du logger

    Returns:
        logging.Logger: Instance du logger
    """
    return logging.getLogger(name)
