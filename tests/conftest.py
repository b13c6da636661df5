"""
Shared pytest fixtures for the PH Geolocation test suite.

Provides a small sample dataset and a fake source adapter that counts fetches,
so the client can be exercised without network access.
"""

import asyncio
import copy
import json

import pytest

from phgeo.adapters import AdapterConfig, BaseSourceAdapter
from phgeo.exceptions import FetchError

# =============================================================================
# TEST DATA
# =============================================================================


SAMPLE_DATASET = {
    "regions": {
        "NCR": {
            "provinces": {
                "Metro Manila": {
                    "cities": {
                        "Quezon City": {"barangays": ["Bagong Silangan", "Commonwealth"]},
                        "Manila": {"barangays": ["Tondo", "Binondo", "Ermita"]},
                        "Pateros": {},
                    }
                }
            }
        },
        "Region IV-A": {
            "provinces": {
                "Rizal": {"cities": {"Antipolo": {"barangays": ["San Roque"]}}},
                "Cavite": {"cities": {"Bacoor": {"barangays": None}}},
            }
        },
        "CAR": {"provinces": None},
    }
}


class FakeAdapter(BaseSourceAdapter):
    """
    In-memory adapter returning scripted payloads.

    Each fetch pops the next entry from `responses`; the last entry is reused
    once the list is exhausted. Exceptions in the list are raised instead of
    returned. An optional gate blocks fetches until it is set.
    """

    def __init__(self, *responses, gate: asyncio.Event | None = None):
        self.responses = list(responses)
        self.gate = gate
        self.fetch_count = 0
        self.closed = False
        super().__init__(AdapterConfig(source_id="fake", url="https://example.test/PH_GEO.json"))

    def _validate_config(self) -> None:
        pass

    async def fetch(self) -> str:
        self.fetch_count += 1
        if self.gate is not None:
            await self.gate.wait()
        else:
            # Yield so concurrent callers get a chance to pile up.
            await asyncio.sleep(0)

        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def sample_dataset():
    """Return the sample dataset as a plain dict."""
    return copy.deepcopy(SAMPLE_DATASET)


@pytest.fixture
def sample_payload(sample_dataset):
    """Return the sample dataset serialized as JSON text."""
    return json.dumps(sample_dataset)


@pytest.fixture
def fake_adapter(sample_payload):
    """Return a FakeAdapter that always serves the sample dataset."""
    return FakeAdapter(sample_payload)


@pytest.fixture
def make_adapter():
    """
    Return a factory for FakeAdapter instances.

    Example:
        adapter = make_adapter(FetchError("boom", url="x", status_code=500), payload)
    """

    def _make_adapter(*responses, gate=None) -> FakeAdapter:
        return FakeAdapter(*responses, gate=gate)

    return _make_adapter


@pytest.fixture
def server_error():
    """Return a FetchError as raised for an HTTP 500 response."""
    return FetchError(
        "Failed to fetch data (500 Internal Server Error)",
        url="https://example.test/PH_GEO.json",
        status_code=500,
    )
