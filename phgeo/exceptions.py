"""
Errors raised by the geolocation client.

Every error derives from GeoError so callers can handle the whole family
with a single except clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phgeo.schemas.geo import GeoLevel


class GeoError(Exception):
    """Base class for all geolocation client errors."""


class FetchError(GeoError):
    """The dataset could not be retrieved (transport failure or non-2xx status)."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(GeoError):
    """The payload is not well-formed JSON or does not match the dataset shape."""


class NotLoadedError(GeoError):
    """The dataset was accessed before a successful load."""

    def __init__(self, message: str = "Data not loaded. Ensure initialization is complete."):
        super().__init__(message)


class NotFoundError(GeoError):
    """
    A region, province or city name is absent from the dataset.

    Attributes:
        level: Hierarchy level at which the lookup failed
        key: The name that could not be resolved
        parent: Name of the enclosing node (None for regions)
    """

    def __init__(self, level: GeoLevel, key: str, parent: str | None = None):
        self.level = level
        self.key = key
        self.parent = parent
        super().__init__(self._format())

    def _format(self) -> str:
        label = self.level.value.capitalize()
        if self.parent is None:
            return f'{label} "{self.key}" not found'
        parent_label = self.level.parent_level.value
        return f'{label} "{self.key}" not found in {parent_label} "{self.parent}"'
