"""
Point d'entrée en ligne de commande de TempHarvest

Effectue une acquisition unique et affiche les températures relevées,
en texte ou en JSON.
"""

import sys
import json
import argparse
from typing import List, Optional

from tempharvest.core.collector import TemperatureCollector
from tempharvest.core.config import HarvestConfig, create_default_config, BACKENDS
from tempharvest.core.exceptions import ConfigurationError, InvalidTemperatureTypeError
from tempharvest.core.filter import Filter
from tempharvest.core.logger import HarvestLogger
from tempharvest.core.temperature import TempHarvest, TemperatureType, VALID_TEMPERATURE_TOKENS


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_UNIT = 2


def format_records(records: List[TempHarvest], temp_type: TemperatureType) -> List[str]:
    """
    Formate les relevés pour l'affichage console

    Args:
        records: Relevés à afficher
        temp_type: Unité des valeurs

    Returns:
        list: Une ligne par relevé
    """
    lines = []
    for record in records:
        if record.temperature is None:
            lines.append(f"{record.name}: N/A")
        else:
            lines.append(f"{record.name}: {record.temperature:.1f}{temp_type.symbol}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tempharvest',
        description='Relevé des températures des capteurs matériels'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Chemin vers le fichier de configuration'
    )

    parser.add_argument(
        '--unit', '-u',
        type=str,
        help=f'Unité de température, une de: {VALID_TEMPERATURE_TOKENS}'
    )

    parser.add_argument(
        '--backend', '-b',
        choices=BACKENDS,
        help='Stratégie d\'acquisition (remplace la configuration)'
    )

    parser.add_argument(
        '--filter', '-f',
        action='append',
        metavar='PATTERN',
        help='Motif de nom de capteur (répétable)'
    )

    parser.add_argument(
        '--keep',
        action='store_true',
        help='Les motifs de --filter sont une liste d\'inclusion (exclusion par défaut)'
    )

    parser.add_argument(
        '--regex',
        action='store_true',
        help='Les motifs de --filter sont des expressions régulières'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Sortie au format JSON'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Fichier de sortie JSON pour les relevés'
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

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Fonction principale

    Returns:
        int: Code de sortie
    """
    args = build_parser().parse_args(argv)

    if args.create_config:
        if not args.config:
            print("❌ --create-config nécessite --config", file=sys.stderr)
            return EXIT_ERROR
        try:
            create_default_config(args.config)
        except OSError as e:
            print(f"❌ Erreur création configuration: {e}", file=sys.stderr)
            return EXIT_ERROR
        print(f"✅ Configuration par défaut créée: {args.config}")
        return EXIT_OK

    config = HarvestConfig(args.config)
    if args.backend:
        config.set('collector', 'backend', args.backend)

    if args.validate_config:
        if config.validate():
            print("✅ Configuration valide")
            return EXIT_OK
        print("❌ Configuration invalide")
        return EXIT_ERROR

    try:
        config.get_logging_config()
        logger = HarvestLogger(config)
    except (ValueError, ConfigurationError) as e:
        print(f"❌ Configuration du logging invalide: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        if args.unit is not None:
            temp_type = TemperatureType.from_str(args.unit)
        else:
            temp_type = config.get_temperature_type()
    except InvalidTemperatureTypeError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_INVALID_UNIT

    try:
        if args.filter:
            temp_filter = Filter.from_entries(
                args.filter,
                is_list_ignored=not args.keep,
                regex=args.regex
            )
        else:
            temp_filter = config.build_filter()

        collector = TemperatureCollector(config, logger)
    except (ValueError, ConfigurationError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    records = collector.collect(temp_type, temp_filter) or []

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump([record.to_dict() for record in records], f, indent=2, ensure_ascii=False)
        except OSError as e:
            print(f"❌ Erreur écriture {args.output}: {e}", file=sys.stderr)
            return EXIT_ERROR
        logger.info(f"Relevés sauvegardés dans: {args.output}")

    if args.json:
        print(json.dumps({
            'backend': collector.backend_name,
            'unit': temp_type.value,
            'temperatures': [record.to_dict() for record in records]
        }, indent=2, ensure_ascii=False))
    else:
        for line in format_records(records, temp_type):
            print(line)

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
