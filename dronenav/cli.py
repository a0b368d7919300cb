"""Command-line checks against the bundled (or configured) catalogs.

Usage:
    python -m dronenav.cli classify --lat 27.6989 --lng 85.3592
    python -m dronenav.cli check --lat 27.6989 --lng 85.3592 --operator recreational \
        --altitude 150 --night --weight "Over 2kg"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from dronenav.contracts.common import GeoPoint
from dronenav.contracts.enums import OperatorType, PolygonMode
from dronenav.contracts.flight_plan import FlightDetails, FlightIntent, Location
from dronenav.persistence.errors import CatalogError
from dronenav.services.engine import load_engine
from dronenav.services.geocoding import reverse_geocode

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DroneNav Nepal airspace checks")
    parser.add_argument("--catalog-dir", type=Path, help="Directory with the catalog JSON files")
    parser.add_argument(
        "--polygon-mode",
        choices=[m.value for m in PolygonMode],
        help="Polygon containment strategy",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    classify = sub.add_parser("classify", help="Classify a point")
    classify.add_argument("--lat", type=float, required=True)
    classify.add_argument("--lng", type=float, required=True)

    check = sub.add_parser("check", help="Resolve regulations for a flight at a point")
    check.add_argument("--lat", type=float, required=True)
    check.add_argument("--lng", type=float, required=True)
    check.add_argument(
        "--operator",
        choices=[o.value for o in OperatorType],
        default=OperatorType.RECREATIONAL.value,
    )
    check.add_argument("--altitude", type=float, default=None, help="Meters AGL")
    check.add_argument("--night", action="store_true", help="Night operation")
    check.add_argument("--weight", default=None, help="'Under 250g', '250g to 2kg', 'Over 2kg'")
    check.add_argument("--location-type", default=None, help="e.g. 'Built-up area (city, town)'")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = load_engine(
            args.catalog_dir,
            PolygonMode(args.polygon_mode) if args.polygon_mode else None,
        )
    except CatalogError as exc:
        logger.error("Cannot load catalogs: %s", exc)
        return 1

    try:
        point = GeoPoint(latitude=args.lat, longitude=args.lng)
    except ValidationError:
        logger.error("Invalid coordinates: %s, %s", args.lat, args.lng)
        return 2

    if args.command == "classify":
        output = engine.classifier.classify_point(point).to_dict()
        output["district"] = reverse_geocode(point).district
    else:
        zones = engine.classifier.zones_containing(point)
        results = engine.resolver.build_results(
            FlightIntent(drone_pilot_type=args.operator, drone_weight=args.weight),
            Location(coordinates=point, location_type=args.location_type),
            FlightDetails(altitude=args.altitude, is_night_operation=args.night),
            zones,
        )
        output = results.to_dict()

    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
