"""
PH Geolocation.

Lookup client for the Philippine regions → provinces → cities → barangays
hierarchy, fetched once from a static JSON document and cached in memory.
"""

from .adapters import AdapterConfig, BaseSourceAdapter, HTTPAdapter
from .client import GeoClient
from .exceptions import FetchError, GeoError, NotFoundError, NotLoadedError, ParseError
from .schemas import GeoDataset, GeoLevel

__version__ = "1.0.0"

__all__ = [
    "GeoClient",
    "AdapterConfig",
    "BaseSourceAdapter",
    "HTTPAdapter",
    "GeoDataset",
    "GeoLevel",
    "GeoError",
    "FetchError",
    "ParseError",
    "NotLoadedError",
    "NotFoundError",
]
