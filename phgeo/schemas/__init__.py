"""Typed dataset models for the geographic hierarchy."""

from .geo import City, GeoDataset, GeoLevel, Province, Region

__all__ = [
    "GeoDataset",
    "GeoLevel",
    "Region",
    "Province",
    "City",
]
