# phgeo/schemas/geo.py
"""
Typed model of the Philippine geographic hierarchy.

The dataset is a single JSON document shaped as::

    {"regions": {<region>: {"provinces": {<province>: {"cities":
        {<city>: {"barangays": [<name>, ...]}}}}}}}

It is validated once when loaded and then treated as immutable. Lookups walk
the tree by display name, level by level, and stop at the first level that
does not resolve.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from phgeo.exceptions import NotFoundError


class GeoLevel(str, Enum):
    """Administrative levels that can be looked up by name."""

    REGION = "region"
    PROVINCE = "province"
    CITY = "city"

    @property
    def parent_level(self) -> "GeoLevel | None":
        """Level of the enclosing node, None for regions."""
        order = list(GeoLevel)
        index = order.index(self)
        return order[index - 1] if index > 0 else None


def _none_as_empty(value: Any, empty: Any) -> Any:
    """Treat a missing/null container as an empty one."""
    return empty if value is None else value


class _Node(BaseModel):
    """Common config for tree nodes: frozen, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class City(_Node):
    """A city or municipality with its ordered barangay names."""

    barangays: list[str] = Field(default_factory=list)

    @field_validator("barangays", mode="before")
    @classmethod
    def _barangays_default(cls, v: Any) -> Any:
        return _none_as_empty(v, [])


class Province(_Node):
    """A province and its cities, keyed by display name."""

    cities: dict[str, City] = Field(default_factory=dict)

    @field_validator("cities", mode="before")
    @classmethod
    def _cities_default(cls, v: Any) -> Any:
        return _none_as_empty(v, {})


class Region(_Node):
    """A region and its provinces, keyed by display name."""

    provinces: dict[str, Province] = Field(default_factory=dict)

    @field_validator("provinces", mode="before")
    @classmethod
    def _provinces_default(cls, v: Any) -> Any:
        return _none_as_empty(v, {})


class GeoDataset(_Node):
    """
    Root of the hierarchy.

    Key order of every mapping follows the source JSON, so name listings come
    back in the order the dataset authors wrote them.
    """

    regions: dict[str, Region]

    # -------------------------------------------------------------------------
    # NODE RESOLUTION
    # -------------------------------------------------------------------------

    def region(self, region: str) -> Region:
        """Resolve a region by name or raise NotFoundError."""
        node = self.regions.get(region)
        if node is None:
            raise NotFoundError(GeoLevel.REGION, region)
        return node

    def province(self, region: str, province: str) -> Province:
        """Resolve a province, checking the region first."""
        node = self.region(region).provinces.get(province)
        if node is None:
            raise NotFoundError(GeoLevel.PROVINCE, province, parent=region)
        return node

    def city(self, region: str, province: str, city: str) -> City:
        """Resolve a city, checking region then province first."""
        node = self.province(region, province).cities.get(city)
        if node is None:
            raise NotFoundError(GeoLevel.CITY, city, parent=province)
        return node

    # -------------------------------------------------------------------------
    # NAME LISTINGS
    # -------------------------------------------------------------------------

    def region_names(self) -> list[str]:
        return list(self.regions)

    def province_names(self, region: str) -> list[str]:
        return list(self.region(region).provinces)

    def city_names(self, region: str, province: str) -> list[str]:
        return list(self.province(region, province).cities)

    def barangay_names(self, region: str, province: str, city: str) -> list[str]:
        return list(self.city(region, province, city).barangays)
