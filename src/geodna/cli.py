"""
Command-line interface for geodna.

Provides commands for encoding, decoding and searching GeoDNA codes.
"""

import argparse
import sys
from typing import Optional

from .codec import bounding_box, decode, encode
from .cover import reduce
from .navigation import distance_in_km
from .neighbours import neighbours
from .options import DEFAULT_PRECISION, DEFAULT_SEARCH_PRECISION
from .search import RadiusSearch, SearchConfig


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="geodna",
        description="Encode, decode and search GeoDNA geocodes",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Encode command
    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode a latitude/longitude pair",
    )
    encode_parser.add_argument("lat", type=float, help="Latitude")
    encode_parser.add_argument("lon", type=float, help="Longitude")
    encode_parser.add_argument(
        "-p", "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=f"Code length (default: {DEFAULT_PRECISION})",
    )
    encode_parser.add_argument(
        "--radians",
        action="store_true",
        help="Coordinates are in radians",
    )

    # Decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a code to the centre of its box",
    )
    decode_parser.add_argument("code", help="GeoDNA code")
    decode_parser.add_argument(
        "--radians",
        action="store_true",
        help="Print coordinates in radians",
    )

    # Bounding box command
    bbox_parser = subparsers.add_parser(
        "bbox",
        help="Print the bounding box of a code",
    )
    bbox_parser.add_argument("code", help="GeoDNA code")

    # Neighbours command
    neighbours_parser = subparsers.add_parser(
        "neighbours",
        help="Print the eight same-sized neighbours of a code",
    )
    neighbours_parser.add_argument("code", help="GeoDNA code")

    # Distance command
    distance_parser = subparsers.add_parser(
        "distance",
        help="Approximate distance in km between two codes",
    )
    distance_parser.add_argument("code_a", help="First GeoDNA code")
    distance_parser.add_argument("code_b", help="Second GeoDNA code")

    # Radius command
    radius_parser = subparsers.add_parser(
        "radius",
        help="List the cells within a radius of a code",
    )
    radius_parser.add_argument("code", help="GeoDNA code")
    radius_parser.add_argument("radius", type=float, help="Radius in km")
    radius_parser.add_argument(
        "-p", "--precision",
        type=int,
        default=DEFAULT_SEARCH_PRECISION,
        help=f"Length of the returned codes (default: {DEFAULT_SEARCH_PRECISION})",
    )
    radius_parser.add_argument(
        "--reduce",
        action="store_true",
        help="Reduce the result to a minimal covering set",
    )
    radius_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print search statistics",
    )

    # Reduce command
    reduce_parser = subparsers.add_parser(
        "reduce",
        help="Reduce codes to a minimal covering set",
    )
    reduce_parser.add_argument("codes", nargs="+", help="GeoDNA codes")

    return parser


def cmd_encode(args: argparse.Namespace) -> int:
    """Handle the encode command."""
    print(encode(args.lat, args.lon, precision=args.precision, radians=args.radians))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Handle the decode command."""
    lat, lon = decode(args.code, radians=args.radians)
    print(f"{lat} {lon}")
    return 0


def cmd_bbox(args: argparse.Namespace) -> int:
    """Handle the bbox command."""
    (lat_min, lat_max), (lon_min, lon_max) = bounding_box(args.code)
    print(f"{lat_min} {lat_max} {lon_min} {lon_max}")
    return 0


def cmd_neighbours(args: argparse.Namespace) -> int:
    """Handle the neighbours command."""
    for code in neighbours(args.code):
        print(code)
    return 0


def cmd_distance(args: argparse.Namespace) -> int:
    """Handle the distance command."""
    print(f"{distance_in_km(args.code_a, args.code_b):.3f}")
    return 0


def cmd_radius(args: argparse.Namespace) -> int:
    """Handle the radius command."""
    search = RadiusSearch(SearchConfig(precision=args.precision))
    codes = search.search(args.code, args.radius)

    if args.reduce:
        codes = reduce(codes)

    for code in codes:
        print(code)

    if args.stats:
        stats = search.stats
        print(f"\nSearch statistics:")
        print(f"  Rows scanned: {stats.rows_scanned}")
        print(f"  Cells visited: {stats.cells_visited}")
        print(f"  Cells accepted: {stats.cells_accepted}")
        print(f"  Duplicates skipped: {stats.duplicates_skipped}")
        if args.reduce:
            print(f"  Codes after reduction: {len(codes)}")

    return 0


def cmd_reduce(args: argparse.Namespace) -> int:
    """Handle the reduce command."""
    for code in reduce(args.codes):
        print(code)
    return 0


COMMANDS = {
    "encode": cmd_encode,
    "decode": cmd_decode,
    "bbox": cmd_bbox,
    "neighbours": cmd_neighbours,
    "distance": cmd_distance,
    "radius": cmd_radius,
    "reduce": cmd_reduce,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except ValueError as e:
        # Includes InvalidCodeError and invalid search settings
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
