"""Command line front end: split a route stored as JSON.

Usage:
    python -m route_splitter route.json -o split.json --max-segments 20

The input is the route wire format ({"name": ..., "segments": [{"latlngs": [...]}]}).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from route_splitter.constants import ProjectionConfig, SplitterConfig
from route_splitter.core.projector import Projector
from route_splitter.core.route_splitter import RouteSplitter, SplitConfig
from route_splitter.errors import RouteSplitterError
from route_splitter.model.route import Route

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="route_splitter", description="Split a hiking route into segments.")
    parser.add_argument("input", type=Path, help="Route JSON file")
    parser.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")
    parser.add_argument(
        "--min-segment-length",
        type=float,
        default=SplitterConfig.MINIMAL_SEGMENT_LENGTH_M,
        help="Minimal segment length in meters (default: %(default)s)",
    )
    parser.add_argument(
        "--max-segments",
        type=int,
        default=SplitterConfig.MAX_SEGMENTS_NUMBER,
        help="Maximum number of simplified vertices (default: %(default)s)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=SplitterConfig.INITIAL_SIMPLIFICATION_TOLERANCE_M,
        help="Initial simplification tolerance in meters (default: %(default)s)",
    )
    parser.add_argument(
        "--crs",
        default=ProjectionConfig.PLANAR_CRS,
        help="Planar CRS used for distances (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every simplification pass")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        route = Route.from_dict(json.loads(args.input.read_text(encoding="utf-8")))
        config = SplitConfig(
            minimal_segment_length=args.min_segment_length,
            max_segments_number=args.max_segments,
            initial_simplification_tolerance=args.tolerance,
        )
        result = RouteSplitter(projector=Projector(planar_crs=args.crs)).split(route=route, config=config)
    except (OSError, json.JSONDecodeError, RouteSplitterError) as e:
        logger.error(f"Failed to split {args.input}: {e}")
        return 1

    output = json.dumps(result.to_dict(), indent=2)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info(f"Wrote {len(result.segments)} segments to {args.output}")
    else:
        sys.stdout.write(output + "\n")
    return 0
