"""
Collecteur spécifique Solaris (et SunOS, OSF/1) pour la sonde

Ce module utilise psrinfo, en forme verbeuse pour la description
et en forme courte pour compter les processeurs en ligne.
"""

import re
from typing import List

from ...core.sysinfo import SysInfo
from ..base import BaseCollector


class SolarisCollector(BaseCollector):
    """
    Collecteur spécifique pour Solaris

    Exemple de ligne verbeuse : "The sparcv9 processor operates at 400 MHz,"
    """

    def _collect(self) -> SysInfo:
        cpu = self._safe_execute(
            lambda: self._parse_description(self._execute_command('psrinfo -v')),
            "Erreur lecture psrinfo -v"
        )

        ncpu = sum(1 for line in self._execute_command('psrinfo') if 'on-line' in line)

        return SysInfo(
            ncpu=ncpu,
            cpu=cpu,
            cpu_type=self._get_cpu_type(),
            host=self._get_hostname(),
        )

    def _parse_description(self, lines: List[str]) -> str:
        """
        Extrait le nom et la fréquence du processeur

        Args:
            lines: Sortie de psrinfo -v

        Returns:
            str: "<nom> (<fréquence>MHz)", '' si non trouvé
        """
        psrinfo = next((line for line in lines
                        if re.search(r'the.*operates.*mhz', line, re.IGNORECASE)), None)
        if psrinfo is None:
            return ''

        match = re.search(r'the (\w+) processor.*at (\d+) mhz', psrinfo, re.IGNORECASE)
        if not match:
            return ''

        cpu, speed = match.groups()
        return f"{cpu} ({speed}MHz)"
