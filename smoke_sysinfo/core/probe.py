"""
Module principal de la sonde

Ce module détecte le système d'exploitation, choisit le collecteur
correspondant et expose le résultat via quatre accesseurs :
- ncpu() : nombre de processeurs logiques
- cpu() : description longue du processeur
- cpu_type() : type court (architecture)
- host() : nom d'hôte
"""

import re
import sys
import platform
from typing import List, Optional, Type, Union

from ..collectors.base import BaseCollector
from ..collectors.generic import GenericCollector
from ..collectors.platform.aix import AIXCollector
from ..collectors.platform.bsd import BSDCollector
from ..collectors.platform.hpux import HPUXCollector
from ..collectors.platform.irix import IRIXCollector
from ..collectors.platform.linux import LinuxCollector
from ..collectors.platform.solaris import SolarisCollector
from ..collectors.platform.windows import WindowsCollector
from .logger import get_logger
from .sysinfo import SysInfo


# Ordre significatif : le premier motif trouvé l'emporte
PLATFORM_COLLECTORS = [
    (re.compile(r'aix', re.IGNORECASE), AIXCollector),
    (re.compile(r'darwin|bsd', re.IGNORECASE), BSDCollector),
    (re.compile(r'hp-?ux', re.IGNORECASE), HPUXCollector),
    (re.compile(r'linux', re.IGNORECASE), LinuxCollector),
    (re.compile(r'irix', re.IGNORECASE), IRIXCollector),
    (re.compile(r'solaris|sunos|osf', re.IGNORECASE), SolarisCollector),
    (re.compile(r'cygwin|mswin32|windows', re.IGNORECASE), WindowsCollector),
]


def detect_os_name() -> str:
    """
    Identifiant du système d'exploitation courant

    Returns:
        str: platform.system() (ex: "Linux", "Darwin", "Windows"), ou
             sys.platform s'il est vide
    """
    try:
        os_name = platform.system()
    except Exception:
        os_name = ''
    return os_name or sys.platform


def select_collector(os_name: Optional[str]) -> Type[BaseCollector]:
    """
    Choisit le collecteur correspondant à un identifiant de système

    Args:
        os_name: Identifiant du système (insensible à la casse)

    Returns:
        type: Classe du collecteur, GenericCollector si rien ne correspond
    """
    for pattern, collector_class in PLATFORM_COLLECTORS:
        if os_name and pattern.search(os_name):
            return collector_class
    return GenericCollector


class SysInfoProbe:
    """
    Sonde d'informations système

    La collecte a lieu une seule fois, à la construction. Elle ne lève
    jamais d'exception : au pire, les champs sont vides.

    Exemple:
        probe = SysInfoProbe()
        print(f"Number of CPU's: {probe.ncpu()}")
    """

    def __init__(self, os_name: Optional[str] = None, config=None, logger=None):
        """
        Détecte le système et lance le collecteur correspondant

        Args:
            os_name: Identifiant du système, détecté automatiquement si absent
            config: Instance de ProbeConfig (optionnelle)
            logger: Instance de ProbeLogger ou logging.Logger (optionnelle)
        """
        self.config = config
        self.logger = logger or get_logger()

        if not os_name and config is not None:
            os_name = config.get('probe', 'os_name', '')
        self._os_name = os_name or detect_os_name()

        collector_class = select_collector(self._os_name)
        self._collector = collector_class(config, self.logger)
        self.logger.debug(f"Système '{self._os_name}': utilisation de {self._collector.collector_name}")

        self._info = self._run_collector()

    def _run_collector(self) -> SysInfo:
        try:
            return self._collector.collect()
        except Exception as e:
            self.logger.exception(f"Collecte {self._collector.collector_name} impossible: {e}")
            return SysInfo.empty(host=self._collector._get_hostname())

    @property
    def os_name(self) -> str:
        return self._os_name

    @property
    def collector_name(self) -> str:
        return self._collector.collector_name

    @property
    def info(self) -> SysInfo:
        return self._info

    @property
    def collection_errors(self) -> List[str]:
        return self._collector.collection_errors.copy()

    def ncpu(self) -> Union[int, str]:
        """Nombre de processeurs logiques ('' si inconnu)"""
        return self._info.ncpu

    def cpu(self) -> str:
        """Description longue du processeur"""
        return self._info.cpu

    def cpu_type(self) -> str:
        """Type court du processeur (architecture)"""
        return self._info.cpu_type

    def host(self) -> str:
        """Nom d'hôte"""
        return self._info.host

    def __repr__(self):
        return (f"{self.__class__.__name__}(ncpu={self.ncpu()!r}, cpu={self.cpu()!r}, "
                f"cpu_type={self.cpu_type()!r}, host={self.host()!r})")


def get_sysinfo() -> SysInfoProbe:
    """
    Crée une sonde pour le système courant

    Returns:
        SysInfoProbe: Sonde entièrement renseignée
    """
    return SysInfoProbe()
