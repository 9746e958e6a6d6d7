"""
Collecteur spécifique BSD et macOS pour la sonde

Ce module interroge sysctl pour les clés hw.model, hw.machine et hw.ncpu.
"""

import re

from ...core.sysinfo import SysInfo, to_cpu_count
from ..base import BaseCollector


class BSDCollector(BaseCollector):
    """
    Collecteur pour les systèmes BSD (FreeBSD, NetBSD, OpenBSD, Darwin)
    """

    def _collect(self) -> SysInfo:
        return SysInfo(
            ncpu=self._safe_execute(
                lambda: to_cpu_count(self._sysctl('ncpu')),
                "Erreur lecture nombre de processeurs"
            ),
            cpu=self._sysctl('model'),
            cpu_type=self._sysctl('machine'),
            host=self._get_hostname(),
        )

    def _sysctl(self, name: str) -> str:
        """
        Lit une clé hw.* via sysctl

        Selon la version, sysctl affiche "hw.ncpu: 4" ou "hw.ncpu = 4".

        Args:
            name: Nom de la clé sans le préfixe hw.

        Returns:
            str: Valeur sans le préfixe, '' si indisponible
        """
        def read():
            output = '\n'.join(self._execute_command(f"sysctl hw.{name}")).strip()
            return re.sub(r'^hw\.' + re.escape(name) + r'\s*[:=]\s*', '', output)

        return self._safe_execute(read, f"Erreur lecture sysctl hw.{name}")
