"""
Classe de base pour tous les collecteurs de la sonde

Ce module définit l'interface commune que tous les collecteurs
doivent implémenter, ainsi que des utilitaires partagés :
- exécution de commandes externes sans jamais lever d'exception
- lecture de pseudo-fichiers
- accès à uname
- extraction de valeurs "clé: valeur"
"""

import re
import time
import platform
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..core.logger import get_logger
from ..core.sysinfo import SysInfo


def extract_value(key: str, lines: List[str]) -> str:
    """
    Récupère la valeur associée à une clé dans des lignes "clé: valeur"

    La première ligne qui correspond à ``^\\s*<key>\\s*[:=]\\s*`` (sans tenir
    compte de la casse) est retenue.

    Args:
        key: Nom de la clé (comparé littéralement)
        lines: Lignes à parcourir

    Returns:
        str: Valeur sans le préfixe, '' si aucune ligne ne correspond
    """
    pattern = re.compile(r'^\s*' + re.escape(key) + r'\s*[:=]\s*', re.IGNORECASE)

    for line in lines:
        match = pattern.match(line)
        if match:
            return line[match.end():].rstrip()

    return ''


class BaseCollector(ABC):
    """
    Classe de base abstraite pour tous les collecteurs

    Chaque collecteur remplit les quatre champs d'un SysInfo. Toute erreur
    rencontrée pendant le calcul d'un champ est journalisée puis remplacée
    par une valeur vide : un collecteur ne lève jamais d'exception.
    """

    def __init__(self, config=None, logger=None):
        """
        Initialise le collecteur de base

        Args:
            config: Instance de ProbeConfig (optionnelle)
            logger: Instance de ProbeLogger ou logging.Logger (optionnelle)
        """
        self.config = config
        self.logger = logger or get_logger()

        # Métadonnées du collecteur
        self.collector_name = self.__class__.__name__
        self.collection_start_time = None
        self.collection_errors = []
        self.last_collection_duration = 0.0

        self.command_timeout = self._get_command_timeout()

    @abstractmethod
    def _collect(self) -> SysInfo:
        """
        Collecte propre à la plateforme - doit être implémentée par chaque collecteur

        Returns:
            SysInfo: Informations collectées
        """
        pass

    def collect(self) -> SysInfo:
        """
        Lance la collecte et mesure sa durée

        Returns:
            SysInfo: Informations collectées
        """
        self._start_collection()
        try:
            return self._collect()
        finally:
            self.last_collection_duration = self._end_collection()

    def _get_command_timeout(self) -> Optional[float]:
        """
        Délai maximal d'exécution des commandes externes

        Returns:
            float: Délai en secondes, None pour une attente illimitée
        """
        if self.config is None:
            return None

        timeout = self.config.getfloat('probe', 'command_timeout', 0.0)
        return timeout if timeout > 0 else None

    def _start_collection(self):
        """Démarre une session de collecte"""
        self.collection_start_time = time.time()
        self.collection_errors = []
        self.logger.debug(f"Début collecte {self.collector_name}")

    def _end_collection(self) -> float:
        """
        Termine une session de collecte

        Returns:
            float: Durée de collecte en secondes
        """
        if self.collection_start_time:
            duration = time.time() - self.collection_start_time
            self.logger.debug(f"Collecte {self.collector_name} terminée en {duration:.2f}s")

            if self.collection_errors:
                self.logger.warning(f"Collecte {self.collector_name} avec {len(self.collection_errors)} erreur(s)")

            return duration
        return 0.0

    def _safe_execute(self, func, error_message: str = "Erreur lors de l'exécution", default_value=''):
        """
        Exécute une fonction de manière sécurisée avec gestion d'erreur

        Args:
            func: Fonction à exécuter
            error_message: Message d'erreur personnalisé
            default_value: Valeur par défaut en cas d'erreur

        Returns:
            Résultat de la fonction ou default_value
        """
        try:
            return func()
        except Exception as e:
            error_details = f"{error_message}: {str(e)}"
            self.collection_errors.append(error_details)
            self.logger.warning(error_details)
            return default_value

    def _execute_command(self, command: str) -> List[str]:
        """
        Exécute une commande système et retourne les lignes de sa sortie

        Une commande absente, en échec ou hors délai produit une sortie vide.

        Args:
            command: Commande à exécuter (interprétée par le shell)

        Returns:
            list: Lignes de la sortie standard (sans fin de ligne)
        """
        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self.command_timeout
            )

            if result.returncode == 0:
                return result.stdout.splitlines()
            else:
                self.logger.debug(f"Commande échouée: {command} (code: {result.returncode})")
                return []

        except subprocess.TimeoutExpired:
            self.logger.warning(f"Timeout pour la commande: {command}")
            return []
        except Exception as e:
            self.logger.warning(f"Erreur lors de l'exécution de '{command}': {e}")
            return []

    def _read_lines(self, file_path: str) -> Optional[List[str]]:
        """
        Lit un fichier de manière sécurisée

        Args:
            file_path: Chemin vers le fichier

        Returns:
            list: Lignes du fichier, None s'il ne peut pas être lu
        """
        try:
            with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
                return f.read().splitlines()
        except FileNotFoundError:
            self.logger.debug(f"Fichier non trouvé: {file_path}")
            return None
        except Exception as e:
            self.logger.warning(f"Erreur lecture fichier {file_path}: {e}")
            return None

    def _uname(self) -> Tuple[str, str]:
        """
        Équivalent portable de uname

        Returns:
            tuple: (machine, nom d'hôte), chaînes vides si indisponible
        """
        try:
            uname = platform.uname()
            return uname.machine or '', uname.node or ''
        except Exception as e:
            self.logger.warning(f"uname indisponible: {e}")
            return '', ''

    def _get_cpu_type(self) -> str:
        """Type court du processeur (champ machine de uname)"""
        return self._uname()[0]

    def _get_hostname(self) -> str:
        """Nom d'hôte (champ node de uname)"""
        return self._uname()[1]

    def get_collection_stats(self) -> dict:
        """
        Retourne les statistiques de la dernière collecte

        Returns:
            dict: Statistiques du collecteur
        """
        return {
            'collector_name': self.collector_name,
            'collection_duration': self.last_collection_duration,
            'errors_count': len(self.collection_errors),
            'errors': self.collection_errors.copy()
        }
