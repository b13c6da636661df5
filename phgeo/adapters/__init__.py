"""
Source Adapters for the geographic dataset.

Adapters provide a unified interface for retrieving the raw dataset document:
- HTTP source (the published JSON file)
- Anything else implementing BaseSourceAdapter (fakes in tests, local mirrors)

Usage:
    from phgeo.adapters import AdapterConfig, HTTPAdapter

    adapter = HTTPAdapter(AdapterConfig(url="https://example.com/PH_GEO.json"))
    payload = await adapter.fetch()
"""

from .base_adapter import DEFAULT_DATASET_URL, AdapterConfig, BaseSourceAdapter
from .http_adapter import HTTPAdapter

__all__ = [
    "AdapterConfig",
    "BaseSourceAdapter",
    "DEFAULT_DATASET_URL",
    "HTTPAdapter",
]
