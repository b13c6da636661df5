"""
Base Source Adapter.

Abstract base class defining the interface for dataset source adapters.
The client depends only on this interface, so the transport can be swapped
(e.g. a fake in tests) without touching the loading logic.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

DEFAULT_DATASET_URL = (
    "https://raw.githubusercontent.com/Zaenalos/PH-Geolocation/refs/heads/main/PH_GEO.json"
)


@dataclass
class AdapterConfig:
    """
    Configuration for source adapters.

    Passed explicitly by the caller; nothing is read from the environment.
    """

    source_id: str = "ph_geo"
    url: str = DEFAULT_DATASET_URL
    request_timeout: float | None = 30.0


class BaseSourceAdapter(ABC):
    """
    Abstract base class for source adapters.

    Adapters encapsulate how the raw dataset document is retrieved. They
    return the payload as text; decoding and validation belong to the client.

    Subclasses must implement:
        - fetch(): Retrieve the raw payload
        - _validate_config(): Validate adapter-specific configuration
    """

    def __init__(self, config: AdapterConfig | None = None):
        """
        Initialize the adapter.

        Args:
            config: AdapterConfig with source settings (defaults if omitted)
        """
        self.config = config or AdapterConfig()
        self._validate_config()

    @property
    def source_id(self) -> str:
        """Get the source identifier."""
        return self.config.source_id

    @property
    def url(self) -> str:
        """Get the dataset URL."""
        return self.config.url

    @abstractmethod
    async def fetch(self) -> str:
        """
        Retrieve the raw dataset document.

        Returns:
            The response body as text

        Raises:
            FetchError: If the transport fails or reports a non-success status
        """

    @abstractmethod
    def _validate_config(self) -> None:
        """
        Validate adapter-specific configuration.

        Raises:
            ValueError: If configuration is invalid
        """

    async def close(self) -> None:
        """
        Release any resources held by the adapter.

        Override in subclasses that hold resources (e.g., HTTP clients).
        """

    async def __aenter__(self) -> "BaseSourceAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
