#!/usr/bin/env python3

import sys
import argparse
import json
import logging
from pathlib import Path

from route_atlas import config
from route_atlas.models import FilterState, RouteNetworkModel, ModelValidationError
from route_atlas.selection import SelectionResolver, SelectionState
from route_atlas.sources import JsonDatasetSource, OpenFlightsSource

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_model(args) -> RouteNetworkModel:
    if args.openflights:
        source = OpenFlightsSource.from_directory(args.openflights)
    else:
        source = JsonDatasetSource(args.data_dir or config.get_data_dir())
    return source.load_model(strict=args.strict)


def main():
    parser = argparse.ArgumentParser(description='Export the routes a map would draw for an airport and filters')

    parser.add_argument('-a', '--airport', help='Selected airport IATA code')
    parser.add_argument('--airline', help='Airline IATA code to filter on (repeatable)', action='append', default=[])
    parser.add_argument('--aircraft', help='Aircraft type code to filter on (repeatable)', action='append', default=[])
    parser.add_argument('--codeshares', help='Include codeshare airlines in the airline filter', action='store_true')
    parser.add_argument('--steps', help='Great circle path segments', type=int, default=config.ROUTE_PATH_STEPS)

    parser.add_argument('-d', '--data-dir', help='Directory with the processed JSON dataset')
    parser.add_argument('--openflights', help='Directory with airports.csv, airlines.dat and routes.dat')
    parser.add_argument('--save-dataset', help='Write the loaded dataset as processed JSON to this directory')
    parser.add_argument('--strict', help='Fail on data issues', action='store_true')

    parser.add_argument('--json', help='JSON output file for the resolved routes')
    parser.add_argument('--stats', help='Print dataset statistics', action='store_true')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        model = load_model(args)
    except (FileNotFoundError, ModelValidationError) as e:
        logger.error(str(e))
        return 1

    if args.save_dataset:
        JsonDatasetSource.save_model(model, args.save_dataset)

    if args.stats:
        for key, value in model.get_statistics().items():
            print(f"{key}: {value}")

    filters = FilterState(
        airlines=frozenset(args.airline),
        aircraft=frozenset(args.aircraft),
        include_codeshares=args.codeshares,
    )
    state = SelectionState(airport=args.airport, filters=filters)
    selection = SelectionResolver(model, steps=args.steps).resolve(state)

    print(selection.summary())
    if args.json:
        with open(Path(args.json), 'w', encoding='utf-8') as f:
            json.dump(selection.to_dict(), f, indent=2)
        logger.info(f"Wrote {len(selection)} routes to {args.json}")
    else:
        for resolved in selection:
            print(f"{resolved.route}  {resolved.color}  {resolved.label}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
