"""
Geolocation Client.

Loads the Philippine geographic dataset once, caches it in memory, and answers
name lookups down the region → province → city → barangay hierarchy.

Usage:
    async with GeoClient() as geo:
        regions = await geo.get_regions()
        barangays = await geo.get_barangays_by_city(
            "NCR", "Metro Manila", "Quezon City"
        )
"""

import asyncio
import json
import logging

from pydantic import ValidationError

from phgeo.adapters import AdapterConfig, BaseSourceAdapter, HTTPAdapter
from phgeo.exceptions import GeoError, NotLoadedError, ParseError
from phgeo.schemas.geo import GeoDataset

logger = logging.getLogger(__name__)


class GeoClient:
    """
    Lazy, load-once client for the geographic dataset.

    Construction does no I/O. The first call to load() (or to any query)
    starts the fetch; concurrent callers share the same pending task, and
    callers after success reuse the cached dataset. A failed load leaves the
    client unloaded so the next call retries.

    Every query awaits load() before reading, so it never observes a
    partially loaded or stale dataset.
    """

    def __init__(
        self,
        adapter: BaseSourceAdapter | None = None,
        config: AdapterConfig | None = None,
    ):
        """
        Initialize the client.

        Args:
            adapter: Source adapter to fetch the raw document with.
                Defaults to an HTTPAdapter built from config.
            config: AdapterConfig for the default adapter (ignored if
                adapter is given)
        """
        self.adapter = adapter if adapter is not None else HTTPAdapter(config)
        self._dataset: GeoDataset | None = None
        self._load_task: asyncio.Task[GeoDataset] | None = None

    # -------------------------------------------------------------------------
    # STATE
    # -------------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        """Whether the dataset has been loaded successfully."""
        return self._dataset is not None

    @property
    def dataset(self) -> GeoDataset:
        """
        The cached dataset.

        Raises:
            NotLoadedError: If load() has not completed successfully yet
        """
        if self._dataset is None:
            raise NotLoadedError()
        return self._dataset

    # -------------------------------------------------------------------------
    # LOADING
    # -------------------------------------------------------------------------

    async def load(self) -> GeoDataset:
        """
        Load the dataset, at most once.

        Returns:
            The validated dataset

        Raises:
            FetchError: If the transport fails or returns a non-success status
            ParseError: If the payload is not JSON or not shaped like the dataset
        """
        if self._dataset is not None:
            logger.debug("Geographic data already loaded, reusing cache")
            return self._dataset

        if self._load_task is None or self._load_task.done():
            self._load_task = asyncio.create_task(self._fetch_dataset())
        else:
            logger.debug("Joining in-flight geographic data load")

        task = self._load_task
        try:
            # Shielded so a cancelled caller does not abort the shared load.
            return await asyncio.shield(task)
        finally:
            # A finished task is never reused: success is served from the
            # cache, failure must be retried with a fresh fetch.
            if task.done() and self._load_task is task:
                self._load_task = None

    async def _fetch_dataset(self) -> GeoDataset:
        """Fetch, decode and validate the dataset, then cache it."""
        logger.info(f"Loading geographic data from {self.adapter.url}")

        try:
            text = await self.adapter.fetch()
            dataset = self._parse(text)
        except GeoError as e:
            logger.error(f"Initialization failed: {e}")
            raise

        self._dataset = dataset
        logger.info(f"Geographic data loaded successfully ({len(dataset.regions)} regions)")
        return dataset

    @staticmethod
    def _parse(text: str) -> GeoDataset:
        """
        Decode and validate the raw payload.

        Raises:
            ParseError: If the text is not JSON or fails schema validation
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Payload is not valid JSON: {e}") from e

        try:
            return GeoDataset.model_validate(payload)
        except ValidationError as e:
            raise ParseError(
                f"Payload does not match the dataset schema ({e.error_count()} errors)"
            ) from e

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    async def get_regions(self) -> list[str]:
        """Return all region names in dataset order."""
        dataset = await self.load()
        return dataset.region_names()

    async def get_provinces_by_region(self, region: str) -> list[str]:
        """
        Return the province names of a region.

        Raises:
            NotFoundError: If the region does not exist
        """
        dataset = await self.load()
        return dataset.province_names(region)

    async def get_cities_by_province(self, region: str, province: str) -> list[str]:
        """
        Return the city names of a province.

        Raises:
            NotFoundError: At the region or province level, checked in that order
        """
        dataset = await self.load()
        return dataset.city_names(region, province)

    async def get_barangays_by_city(self, region: str, province: str, city: str) -> list[str]:
        """
        Return the barangay names of a city (empty if none are recorded).

        Raises:
            NotFoundError: At the first of region, province, city that is missing
        """
        dataset = await self.load()
        return dataset.barangay_names(region, province, city)

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    async def close(self) -> None:
        """Release the adapter's resources. The cached dataset is kept."""
        await self.adapter.close()

    async def __aenter__(self) -> "GeoClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
