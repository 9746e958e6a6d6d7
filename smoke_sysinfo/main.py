"""
Point d'entrée principal de la sonde smoke-sysinfo

Affiche les informations système du poste courant :
- En texte, au format des rapports de smoke test
- En JSON, pour une exploitation automatique
"""

import sys
import json
import argparse

from smoke_sysinfo.core.config import ProbeConfig, create_default_config
from smoke_sysinfo.core.logger import ProbeLogger
from smoke_sysinfo.core.probe import SysInfoProbe


def format_text(probe: SysInfoProbe) -> str:
    """
    Formate le résultat d'une sonde en texte

    Args:
        probe: Instance de SysInfoProbe

    Returns:
        str: Rapport texte, une information par ligne
    """
    return '\n'.join([
        f"Number of CPU's: {probe.ncpu()}",
        f"Processor type: {probe.cpu_type()}",
        f"Processor description: {probe.cpu()}",
        f"Host name: {probe.host()}",
    ])


def format_json(probe: SysInfoProbe) -> str:
    """Formate le résultat d'une sonde en JSON"""
    data = probe.info.as_dict()
    data['os_name'] = probe.os_name
    return json.dumps(data, indent=2, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='smoke-sysinfo',
        description='Sonde système - nombre et type de processeurs, nom d\'hôte'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Chemin vers le fichier de configuration'
    )

    parser.add_argument(
        '--os',
        dest='os_name',
        type=str,
        help='Identifiant du système à utiliser à la place de la détection automatique'
    )

    parser.add_argument(
        '--format', '-f',
        choices=['text', 'json'],
        default='text',
        help='Format de sortie'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Fichier de sortie (sortie standard par défaut)'
    )

    parser.add_argument(
        '--create-config',
        action='store_true',
        help='Crée un fichier de configuration par défaut'
    )

    parser.add_argument(
        '--validate-config',
        action='store_true',
        help='Valide la configuration actuelle'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Affiche les messages de debug'
    )

    return parser


def main(argv=None):
    """
    Point d'entrée principal avec gestion des arguments de ligne de commande
    """
    args = build_parser().parse_args(argv)

    # Créer une configuration par défaut
    if args.create_config:
        if not args.config:
            print("❌ --create-config nécessite --config", file=sys.stderr)
            return 1
        try:
            create_default_config(args.config)
            print(f"✅ Configuration par défaut créée: {args.config}")
            return 0
        except OSError as e:
            print(f"❌ Erreur création configuration: {e}", file=sys.stderr)
            return 1

    config = ProbeConfig(args.config)

    # Valider la configuration
    if args.validate_config:
        if config.validate():
            print("✅ Configuration valide")
            return 0
        else:
            print("❌ Configuration invalide")
            return 1

    logger = ProbeLogger(config, level='DEBUG' if args.verbose else None)
    logger.log_config_info(config)

    probe = SysInfoProbe(args.os_name, config=config, logger=logger)
    logger.log_probe_info(probe)

    report = format_json(probe) if args.format == 'json' else format_text(probe)

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(report + '\n')
        except OSError as e:
            print(f"❌ Erreur écriture {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"✅ Données sauvegardées dans: {args.output}")
    else:
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
