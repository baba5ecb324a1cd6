"""Model exports."""
from georegion.models.region import Region

__all__ = [
    "Region",
]
