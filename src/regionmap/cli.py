"""Command-line inspection of GeoJSON region maps.

Usage:
    regionmap summary data/rus_simple_highcharts.geo.json
    regionmap hit data/rus_simple_highcharts.geo.json 420 310 --scale 1.5
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from regionmap.catalog import RegionCatalog
from regionmap.config import settings
from regionmap.errors import GeoJSONLoadError


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def _load(path: str) -> RegionCatalog | None:
    catalog = RegionCatalog(settings)
    try:
        catalog.load_file(path)
    except GeoJSONLoadError as e:
        logger.error(f"Failed to load {path}: {e}")
        return None
    return catalog


def cmd_summary(args: argparse.Namespace) -> int:
    catalog = _load(args.file)
    if catalog is None:
        return 1

    regions = catalog.regions()
    if args.json:
        print(json.dumps([r.to_dict() for r in regions], ensure_ascii=False, indent=2))
        return 0

    for region in regions:
        print(f"{region.id:<12} {region.status:<8} {len(region.paths):>3} paths  {region.name}")
    print(f"{len(regions)} regions")
    return 0


def cmd_hit(args: argparse.Namespace) -> int:
    catalog = _load(args.file)
    if catalog is None:
        return 1

    catalog.build_geometry()
    hit = catalog.hit_test(args.x, args.y, args.scale, args.offset_x, args.offset_y)

    if args.json:
        print(json.dumps(hit.to_dict() if hit else None, ensure_ascii=False))
    elif hit is None:
        print("no region")
    else:
        print(f"{hit.id} {hit.name} ({hit.status})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regionmap",
        description="Inspect GeoJSON region maps and hit-test canvas points",
    )
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help="loguru level for diagnostics on stderr (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    sub = parser.add_subparsers(dest="command", required=True)

    summary = sub.add_parser("summary", help="List the regions of a map")
    summary.add_argument("file", help="GeoJSON FeatureCollection")
    summary.set_defaults(func=cmd_summary)

    hit = sub.add_parser("hit", help="Find the region under a canvas point")
    hit.add_argument("file", help="GeoJSON FeatureCollection")
    hit.add_argument("x", type=float)
    hit.add_argument("y", type=float)
    hit.add_argument("--scale", type=float, default=1.0, help="View zoom factor")
    hit.add_argument("--offset-x", type=float, default=0.0, help="View pan offset X")
    hit.add_argument("--offset-y", type=float, default=0.0, help="View pan offset Y")
    hit.set_defaults(func=cmd_hit)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
