"""Load regions from GeoJSON through the query engine.

Features go through the same validation as API input; invalid ones are
skipped and reported.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from georegion.errors import PolygonValidationError
from georegion.services.region_query import RegionQueryEngine

logger = logging.getLogger("georegion.seed")

# São Paulo neighbourhoods as (name, min_lon, min_lat, max_lon, max_lat)
DEFAULT_NEIGHBOURHOODS = [
    ("Vila Mariana", -46.634437, -23.589548, -46.629837, -23.584548),
    ("Pinheiros", -46.701, -23.561, -46.691, -23.551),
    ("Moema", -46.658, -23.609, -46.648, -23.599),
    ("Butantã", -46.736, -23.573, -46.726, -23.563),
    ("Tatuapé", -46.57, -23.54, -46.56, -23.53),
    ("Santana", -46.635, -23.49, -46.625, -23.48),
    ("Ipiranga", -46.61, -23.6, -46.6, -23.59),
    ("Liberdade", -46.64, -23.56, -46.63, -23.55),
]


def bbox_ring(min_lon: float, min_lat: float, max_lon: float, max_lat: float) -> list[list[float]]:
    """Closed counter-clockwise ring for a bounding box."""
    return [
        [min_lon, min_lat],
        [max_lon, min_lat],
        [max_lon, max_lat],
        [min_lon, max_lat],
        [min_lon, min_lat],
    ]


def default_features() -> list[dict]:
    return [
        {
            "type": "Feature",
            "properties": {"name": name},
            "geometry": {"type": "Polygon", "coordinates": [bbox_ring(*bbox)]},
        }
        for name, *bbox in DEFAULT_NEIGHBOURHOODS
    ]


def load_features(path: Path) -> list[dict]:
    """Read the features of a GeoJSON FeatureCollection."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data.get("features", [])


@dataclass
class SeedReport:
    created: int = 0
    skipped: list[str] = field(default_factory=list)


async def seed_regions(
    engine: RegionQueryEngine,
    features: Iterable[dict],
    name_property: str = "name",
    replace: bool = False,
) -> SeedReport:
    """Create one region per Polygon feature.

    With ``replace`` every existing region is deleted first.
    """
    report = SeedReport()
    if replace:
        for region in await engine.list_regions():
            await engine.delete_region(region.id)

    for index, feature in enumerate(features):
        props = feature.get("properties") or {}
        geometry: Optional[dict] = feature.get("geometry")
        name = str(props.get(name_property) or f"feature-{index}").strip()

        if not geometry or geometry.get("type") != "Polygon" or not geometry.get("coordinates"):
            logger.warning(f"Skipping {name}: not a Polygon feature")
            report.skipped.append(name)
            continue

        try:
            await engine.create_region(name, geometry["coordinates"][0])
        except PolygonValidationError as e:
            logger.warning(f"Skipping {name}: {e.code}")
            report.skipped.append(name)
            continue
        report.created += 1

    logger.info(f"Seeded {report.created} regions, skipped {len(report.skipped)}")
    return report
