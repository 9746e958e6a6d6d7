"""
Collecteur spécifique HP-UX pour la sonde

Ce module part du collecteur générique et compte les processeurs avec ioscan.
"""

from dataclasses import replace

from ...core.sysinfo import SysInfo
from ..generic import GenericCollector


class HPUXCollector(GenericCollector):
    """
    Collecteur spécifique pour HP-UX
    """

    def _collect(self) -> SysInfo:
        hpux = super()._collect()

        ncpu = sum(1 for line in self._execute_command('ioscan -fnkC processor')
                   if line.startswith('processor'))

        return replace(hpux, ncpu=ncpu)
