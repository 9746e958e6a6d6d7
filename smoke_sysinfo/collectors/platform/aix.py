"""
Collecteur spécifique AIX pour la sonde

Ce module utilise les commandes AIX :
- lsdev pour lister les processeurs disponibles
- lsattr pour lire les attributs du premier processeur
"""

import re
import shlex
from typing import List

from ...core.sysinfo import SysInfo
from ..base import BaseCollector


class AIXCollector(BaseCollector):
    """
    Collecteur spécifique pour AIX

    La description et le type du processeur reprennent tous deux la
    valeur de l'attribut "enable" du premier processeur.
    """

    def _collect(self) -> SysInfo:
        lsdev = [line for line in self._execute_command('lsdev -C -c processor -S Available')
                 if 'Available' in line]

        cpu = self._safe_execute(
            lambda: self._get_enable_attribute(lsdev),
            "Erreur lecture attributs processeur"
        )

        return SysInfo(
            ncpu=len(lsdev),
            cpu=cpu,
            cpu_type=cpu,
            host=self._get_hostname(),
        )

    def _get_enable_attribute(self, lsdev: List[str]) -> str:
        """
        Lit l'attribut "enable" du premier processeur listé

        Args:
            lsdev: Lignes de lsdev décrivant les processeurs disponibles

        Returns:
            str: Valeur de l'attribut, '' si introuvable
        """
        device = next((line.split()[0] for line in lsdev if re.match(r'\S+', line)), None)
        if not device:
            return ''

        for line in self._execute_command(f"lsattr -E -O -l {shlex.quote(device)}"):
            match = re.match(r'enable:([^:\s]+)', line)
            if match:
                return match.group(1)

        return ''
