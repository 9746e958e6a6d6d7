"""
Collecteur générique, utilisé quand aucune plateforme n'est reconnue

Seul uname est supposé disponible.
"""

from ..core.sysinfo import SysInfo
from .base import BaseCollector


class GenericCollector(BaseCollector):
    """
    Collecteur portable basé uniquement sur uname

    Aucune source portable ne donne de description du processeur ni leur
    nombre : la description reprend le type court et ncpu reste vide.
    """

    def _collect(self) -> SysInfo:
        machine, host = self._uname()

        return SysInfo(
            ncpu='',
            cpu=machine,
            cpu_type=machine,
            host=host,
        )
