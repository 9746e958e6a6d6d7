"""
Collecteur spécifique Windows pour la sonde

Ce module lit les variables d'environnement définies par Windows
(et conservées sous Cygwin) :
- PROCESSOR_ARCHITECTURE
- PROCESSOR_IDENTIFIER
- NUMBER_OF_PROCESSORS
"""

import os

from ...core.sysinfo import SysInfo, to_cpu_count
from ..base import BaseCollector


class WindowsCollector(BaseCollector):
    """
    Collecteur spécifique pour Windows

    Une variable absente donne un champ vide ; les valeurs du collecteur
    générique ne sont pas utilisées en remplacement.
    """

    def _collect(self) -> SysInfo:
        return SysInfo(
            ncpu=self._safe_execute(
                lambda: to_cpu_count(os.environ.get('NUMBER_OF_PROCESSORS', '')),
                "Erreur lecture NUMBER_OF_PROCESSORS"
            ),
            cpu=os.environ.get('PROCESSOR_IDENTIFIER', ''),
            cpu_type=os.environ.get('PROCESSOR_ARCHITECTURE', ''),
            host=self._get_hostname(),
        )
