"""Seed the regions table from a GeoJSON file or the built-in São Paulo set.

Usage:
    python scripts/seed_regions.py [path/to/regions.geojson] [--replace]
"""
import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path to import georegion modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from georegion.services import get_query_engine
from georegion.seed import default_features, load_features, seed_regions


async def main(args) -> int:
    if args.path:
        path = Path(args.path)
        if not path.exists():
            print(f"File not found: {path}")
            return 1
        features = load_features(path)
        print(f"Found {len(features)} features in {path}.")
    else:
        features = default_features()
        print(f"Using {len(features)} built-in São Paulo regions.")

    engine = get_query_engine()
    report = await seed_regions(engine, features, name_property=args.name_property, replace=args.replace)
    print(f"Successfully seeded {report.created} regions.")
    if report.skipped:
        print(f"Skipped: {', '.join(report.skipped)}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Seed regions")
    parser.add_argument("path", nargs="?", help="GeoJSON FeatureCollection of Polygon features")
    parser.add_argument("--name-property", default="name", help="Feature property holding the region name")
    parser.add_argument("--replace", action="store_true", help="Delete existing regions first")
    sys.exit(asyncio.run(main(parser.parse_args())))
