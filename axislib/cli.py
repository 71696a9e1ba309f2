"""axislib.cli.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Command line option handling.
Author: Will Bickerstaff
Version: 0.1
"""

import argparse
import logging
from typing import List, Optional
from gpsaxis.common import Axis
from gpsaxis.coord import Coordinate, Latitude, Longitude
from .config import ConfigLoader
from .common import format_decimal
from .exceptions import ExitAfter

AXIS_CLASSES = {Axis.LATITUDE: Latitude, Axis.LONGITUDE: Longitude}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Argument parser setup."""
    parser = argparse.ArgumentParser(
        description="Normalize GPS coordinate values to canonical DMS text")
    parser.add_argument('values', nargs='+',
                        help='Coordinate values to parse, e.g. 40.446195 '
                        'or 40°26\'46"N')
    parser.add_argument('--axis', choices=['latitude', 'longitude'],
                        default=None,
                        help='Axis of the values. Defaults to '
                        'PARSE.default_axis from the config file.')
    parser.add_argument('--pair', action="store_true",
                        help='Parse each value as a "latitude, longitude" '
                        'pair.')
    parser.add_argument('--config', type=str, default="config.ini",
                        help='Path to the configuration file.')
    parser.add_argument('--log_level', type=str,
                        help='Set the logging level (e.g., DEBUG, INFO)')
    return parser.parse_args(argv)


def format_axis(element) -> str:
    """Canonical text of an axis value, with decimal degrees if enabled."""
    if not ConfigLoader().show_decimal:
        return element.canonical
    return "{}\t{}".format(element.canonical, format_decimal(
        element.decimal_value, ConfigLoader().decimal_places))


def format_pair(coordinate: Coordinate) -> str:
    """Canonical text of a pair, with decimal degrees if enabled."""
    if not ConfigLoader().show_decimal:
        return str(coordinate)
    places = ConfigLoader().decimal_places
    lat, lon = coordinate.decimal_value
    return "{}\t{}, {}".format(coordinate, format_decimal(lat, places),
                               format_decimal(lon, places))


def parse_value(text: str, axis: Optional[Axis], pair: bool) -> \
        Optional[str]:
    """Parse one command line value and return its output line.

    Returns:
        Optional[str]: The formatted result, None if the value is invalid.
    """
    if pair:
        coordinate = Coordinate.try_parse_string(text)
        return format_pair(coordinate) if coordinate is not None else None
    element = AXIS_CLASSES[axis].try_parse_string(text)
    return format_axis(element) if element is not None else None


def arg_handler(args: argparse.Namespace) -> None:
    """Handle passed cli options.

    Each value is printed on its own line. Invalid values are reported and
    make the program exit with status 1.

    Raises:
        ExitAfter: Always, carrying the exit status.
    """
    axis = Axis[args.axis.upper()] if args.axis \
        else ConfigLoader().default_axis
    failed = 0
    for value in args.values:
        line = parse_value(value, axis, args.pair)
        if line is None:
            failed += 1
            kind = "coordinate pair" if args.pair else axis.value.lower()
            logging.warning("CLI: %r is not a valid %s", value, kind)
            print(f"{value}\tINVALID {kind}")
        else:
            logging.info("CLI: %r parsed as %s", value, line)
            print(line)
    raise ExitAfter(1 if failed else 0)
