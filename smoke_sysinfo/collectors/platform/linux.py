"""
Collecteur spécifique Linux pour la sonde

Ce module utilise le pseudo-fichier /proc/cpuinfo, qui contient un bloc
d'attributs par processeur.
"""

import re
from typing import List, Union

from ...core.sysinfo import SysInfo, to_cpu_count
from ..base import BaseCollector, extract_value


class LinuxCollector(BaseCollector):
    """
    Collecteur spécifique pour Linux

    Le format de /proc/cpuinfo diffère sur sparc, qui résume tous les
    processeurs dans un seul bloc.
    """

    cpuinfo_path = '/proc/cpuinfo'

    def _collect(self) -> SysInfo:
        cpu_type = self._get_cpu_type()

        # Valeurs conservées si /proc/cpuinfo est illisible
        ncpu, cpu = '', cpu_type

        cpu_info = self._read_lines(self.cpuinfo_path)
        if cpu_info is not None:
            ncpu = self._safe_execute(
                lambda: self._parse_ncpu(cpu_info, cpu_type),
                "Erreur lecture nombre de processeurs"
            )
            cpu = self._safe_execute(
                lambda: self._parse_cpu(cpu_info, cpu_type),
                "Erreur lecture modèle de processeur"
            )

        return SysInfo(
            ncpu=ncpu,
            cpu=cpu,
            cpu_type=cpu_type,
            host=self._get_hostname(),
        )

    def _parse_ncpu(self, cpu_info: List[str], cpu_type: str) -> Union[int, str]:
        if 'sparc' in cpu_type:
            return to_cpu_count(extract_value('ncpus active', cpu_info))

        # Chaque processeur a son propre bloc
        return sum(1 for line in cpu_info if re.match(r'processor\s+:\s+', line))

    def _parse_cpu(self, cpu_info: List[str], cpu_type: str) -> str:
        if 'sparc' in cpu_type:
            return extract_value('cpu', cpu_info)

        model = extract_value('model name', cpu_info)
        vendor = extract_value('vendor_id', cpu_info)
        mhz = extract_value('cpu mhz', cpu_info)

        try:
            speed = float(mhz)
        except ValueError:
            speed = 0.0

        return f"{model} ({vendor} {speed:.0f}MHz)"
