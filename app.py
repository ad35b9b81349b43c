"""
ClimaTrack — Command-Line Entry Point
=====================================
Water-quality risk estimate for a demo site or an arbitrary coordinate.

    python app.py --site lagos_island
    python app.py --lat 6.52 --lon 3.37 --reports reports.csv --zones 9
"""

import argparse
import json
import logging
import sys
from datetime import datetime

from analysis.prediction_engine import predict
from analysis.spatial_risk import assess_zones, build_zone_grid
from config.demo_sites import DEMO_SITES
from data_fetch.data_pipeline import DataPipeline
from data_fetch.geocoding_client import PlaceResolver
from data_fetch.synthetic_data import SyntheticDataGenerator
from models.entities import Coordinate, InvalidCoordinateError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ClimaTrack water-quality risk estimate")
    where = parser.add_mutually_exclusive_group(required=True)
    where.add_argument("--site", choices=sorted(DEMO_SITES), help="named demo site")
    where.add_argument("--lat", type=float, help="latitude in decimal degrees")
    parser.add_argument("--lon", type=float, help="longitude (with --lat)")
    parser.add_argument("--date", help="target date, YYYY-MM-DD")
    parser.add_argument("--reports", help="CSV of historical reports")
    parser.add_argument("--offline", action="store_true", help="skip live weather and geocoding")
    parser.add_argument("--seed", type=int, default=None, help="seed for synthetic inputs")
    parser.add_argument("--zones", type=int, default=0, help="also assess N nearby zones")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        if args.site:
            site = DEMO_SITES[args.site]
            coordinate = Coordinate(site["lat"], site["lon"])
        else:
            if args.lon is None:
                print("--lon is required with --lat", file=sys.stderr)
                return 2
            coordinate = Coordinate(args.lat, args.lon)
    except InvalidCoordinateError as e:
        print(f"Invalid coordinate: {e}", file=sys.stderr)
        return 2

    target_date = datetime.strptime(args.date, "%Y-%m-%d") if args.date else None

    pipeline = DataPipeline(
        reports_path=args.reports,
        synthetic=SyntheticDataGenerator(seed=args.seed),
        use_live_weather=not args.offline,
    )
    raw = pipeline.fetch_all(coordinate)
    result = predict(coordinate, raw["reports"], raw["weather"], target_date)

    output = {"prediction": result.to_dict(), "sources": raw["sources"], "errors": raw["errors"]}

    if not args.offline:
        resolver = PlaceResolver()
        output["place"] = resolver.resolve_place_name(coordinate)
        if args.zones:
            zones = assess_zones(build_zone_grid(coordinate, n_zones=args.zones), pipeline, resolver, target_date)
            output["zones"] = [
                {"id": z["id"], "name": z["name"], "distance_km": z["distance_km"],
                 "quality_score": z["quality_score"], "status": z["status"]}
                for z in zones
            ]

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
