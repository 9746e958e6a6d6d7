"""
Enregistrement immuable des informations système

Un SysInfo est créé une seule fois par sonde et n'est jamais modifié.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Union


@dataclass(frozen=True)
class SysInfo:
    """
    Les quatre informations rapportées par la sonde

    ncpu vaut '' lorsque le nombre de processeurs est inconnu.
    """

    ncpu: Union[int, str]
    cpu: str
    cpu_type: str
    host: str

    @classmethod
    def empty(cls, host: str = '') -> 'SysInfo':
        """Enregistrement vide (utilisé quand aucune collecte n'a abouti)"""
        return cls(ncpu='', cpu='', cpu_type='', host=host)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def to_cpu_count(value: Any) -> Union[int, str]:
    """
    Normalise un nombre de processeurs brut

    Args:
        value: Valeur brute (int, texte de commande, variable d'environnement)

    Returns:
        int si la valeur est un entier positif ou nul, '' sinon
    """
    if isinstance(value, bool) or value is None:
        return ''
    if isinstance(value, int):
        return value if value >= 0 else ''

    value = str(value).strip()
    if not value.isdecimal():
        return ''
    try:
        return int(value)
    except ValueError:
        return ''
