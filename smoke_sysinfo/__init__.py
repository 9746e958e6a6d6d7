"""
smoke-sysinfo - Informations système pour les rapports de smoke test

Ce module fournit une sonde qui détecte le système d'exploitation et
rapporte le nombre de processeurs, leur description, leur type et le
nom d'hôte.

Version: 1.0.0
"""

__version__ = "1.0.0"

# Imports principaux pour faciliter l'utilisation
from .core.config import ProbeConfig
from .core.logger import ProbeLogger
from .core.probe import SysInfoProbe, get_sysinfo, select_collector
from .core.sysinfo import SysInfo

__all__ = ['SysInfoProbe', 'SysInfo', 'get_sysinfo', 'select_collector', 'ProbeConfig', 'ProbeLogger']
