#!/usr/bin/env python3
"""
Command line entry point for the naval map coordinate tools.

Subcommands:
    convert   Convert a JSON point file between engine and map space
    bearing   Bearing between two map points, with compass label
    distance  Travel distance between two map points
    compass   Degrees to compass label, or compass label to degrees
"""

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from converter import ConversionConfig, Direction, convert_file
from map_geometry import (
    compass_to_degrees,
    degrees_to_compass,
    get_distance,
    rotation_angle_in_degrees,
)
from rich_console import (
    setup_rich_logging,
    print_config_summary,
    print_result,
    print_completion_summary,
    print_error,
)

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert and measure coordinates on the naval map."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert a JSON point file")
    convert.add_argument("input_file", help="JSON list of [x, y] pairs or x/y records")
    convert.add_argument("output_file", help="Path to output JSON file")
    convert.add_argument("--to-engine", action="store_true",
                         help="Convert map coordinates to engine coordinates (default: engine to map)")
    convert.add_argument("--adjust-origin", action="store_true",
                         help="Map side uses a top-left origin")
    convert.add_argument("--precision", type=int, default=None,
                         help="Round coordinates to this many digits")

    for name, help_text in (("bearing", "Bearing between two map points"),
                            ("distance", "Travel distance between two map points")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("x0", type=float)
        p.add_argument("y0", type=float)
        p.add_argument("x1", type=float)
        p.add_argument("y1", type=float)

    compass = sub.add_parser("compass", help="Convert between degrees and compass labels")
    compass.add_argument("value", help="Degrees (number) or compass label such as 'NE'")

    return parser


def parse_config(args: argparse.Namespace) -> ConversionConfig:
    return ConversionConfig(
        input_file=args.input_file,
        output_file=args.output_file,
        direction=Direction.TO_ENGINE if args.to_engine else Direction.TO_MAP,
        adjust_origin=args.adjust_origin,
        precision=args.precision,
    )


def run_convert(args: argparse.Namespace) -> int:
    config = parse_config(args)
    print_config_summary(
        config.input_file,
        config.output_file,
        config.direction.value,
        adjust_origin=config.adjust_origin,
        precision=config.precision,
    )
    count, output_path = convert_file(config)
    print_completion_summary(output_path, count)
    return 0


def run_bearing(args: argparse.Namespace) -> int:
    bearing = rotation_angle_in_degrees((args.x0, args.y0), (args.x1, args.y1))
    print_result("Bearing", {
        "Degrees": f"[bearing]{bearing:.2f}[/]",
        "Compass": f"[compass]{degrees_to_compass(bearing)}[/]",
    })
    return 0


def run_distance(args: argparse.Namespace) -> int:
    distance = get_distance((args.x0, args.y0), (args.x1, args.y1))
    print_result("Distance", {"Travel distance": f"[coord]{distance:.3f}[/]"})
    return 0


def run_compass(args: argparse.Namespace) -> int:
    try:
        degrees = float(args.value)
    except ValueError:
        degrees = compass_to_degrees(args.value)
        print_result("Compass", {"Label": args.value, "Degrees": f"[bearing]{degrees:g}[/]"})
    else:
        print_result("Compass", {"Degrees": f"{degrees:g}", "Label": f"[compass]{degrees_to_compass(degrees)}[/]"})
    return 0


COMMANDS = {
    "convert": run_convert,
    "bearing": run_bearing,
    "distance": run_distance,
    "compass": run_compass,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_rich_logging(verbose=args.verbose)

    try:
        return COMMANDS[args.command](args)
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
    except json.JSONDecodeError as e:
        print_error(f"Could not parse JSON: {e}", hint="The input must be a JSON list of points")
    except ValueError as e:
        print_error(str(e))
    except OSError as e:
        print_error(str(e), hint="Check that the input file exists and the output directory is writable")
    return 1


if __name__ == "__main__":
    sys.exit(main())
