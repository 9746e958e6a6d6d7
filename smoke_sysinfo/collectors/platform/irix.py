"""
Collecteur spécifique IRIX pour la sonde

Ce module utilise l'inventaire matériel hinv :
- hinv -t cpu pour le modèle
- hinv -c processor pour le nombre et le type
"""

import re
from typing import List, Tuple, Union

from ...core.sysinfo import SysInfo, to_cpu_count
from ..base import BaseCollector


class IRIXCollector(BaseCollector):
    """
    Collecteur spécifique pour IRIX

    Exemple de ligne résumant les processeurs : "4 250 MHZ IP27 Processors"
    """

    def _collect(self) -> SysInfo:
        cpu = self._safe_execute(self._get_cpu, "Erreur lecture hinv -t cpu")

        ncpu, cpu_type = self._safe_execute(
            lambda: self._parse_processors(self._execute_command('hinv -c processor')),
            "Erreur lecture hinv -c processor",
            ('', '')
        )

        return SysInfo(
            ncpu=ncpu,
            cpu=cpu,
            cpu_type=cpu_type,
            host=self._get_hostname(),
        )

    def _get_cpu(self) -> str:
        lines = self._execute_command('hinv -t cpu')
        if not lines:
            return ''
        return re.sub(r'^CPU:\s+', '', lines[0])

    def _parse_processors(self, lines: List[str]) -> Tuple[Union[int, str], str]:
        """
        Extrait le nombre et le type de processeurs

        Args:
            lines: Sortie de hinv -c processor

        Returns:
            tuple: (nombre de processeurs, type), ('', '') si aucune ligne ne correspond
        """
        summary = next((line for line in lines
                        if re.search(r'\d+.+processors?$', line, re.IGNORECASE)), None)
        if summary is None:
            return '', ''

        tokens = summary.split()
        cpu_type = tokens[-2] if len(tokens) >= 2 else ''
        return to_cpu_count(tokens[0]), cpu_type
