"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: ClientConfig with logging enabled and a fake base URL
    - chain_payload: Backend JSON answer with a two-link chain
    - make_api_client: Builds a ChainApiClient over an httpx MockTransport
    - async_client: HTTPX client bound to the FastAPI app with the sample backend

Async fixtures clean up the HTTP clients they create.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from chainref.api.app import create_app
from chainref.client.config import ClientConfig
from chainref.client.http import ChainApiClient

TEST_BASE_URL = "http://backend.test/"


@pytest.fixture
def client_config() -> ClientConfig:
    """Return a client configuration pointing at a fake backend.

    Returns:
        ClientConfig with default timeouts.
    """
    return ClientConfig(base_url=TEST_BASE_URL, log_bodies=True)


@pytest.fixture
def chain_payload() -> dict[str, Any]:
    """Return a well-formed backend answer.

    Entry A links to B. B terminates the chain and carries one
    cross-theme connection.

    Returns:
        JSON-compatible dict in the backend wire format.
    """
    return {
        "theme": "Sabbath",
        "summary": "Rest from creation to commandment.",
        "chain": [
            {
                "order": 1,
                "reference": "A",
                "text": "First passage.",
                "linkingPhrase": "Leads to the commandment.",
                "nextVerse": "B",
                "crossThemeConnections": [],
            },
            {
                "order": 2,
                "reference": "B",
                "text": "Second passage.",
                "linkingPhrase": "Ends the chain.",
                "nextVerse": None,
                "crossThemeConnections": [
                    {"theme": "Grace", "reference": "C", "text": "Connected passage."}
                ],
            },
        ],
    }


@pytest.fixture
async def make_api_client(
    client_config: ClientConfig,
) -> AsyncGenerator[Callable[[Callable[..., Any]], ChainApiClient]]:
    """Create ChainApiClients backed by a MockTransport handler.

    Yields:
        Factory taking an httpx handler and returning a ChainApiClient.
    """
    created: list[ChainApiClient] = []

    def factory(handler: Callable[..., Any]) -> ChainApiClient:
        api_client = ChainApiClient.from_config(client_config, httpx.MockTransport(handler))
        created.append(api_client)
        return api_client

    yield factory

    for api_client in created:
        await api_client.aclose()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the app with the sample backend mounted.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app = create_app(include_sample_backend=True)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
