"""HTTP client for the inference backend.

Wraps an explicitly constructed ``httpx.AsyncClient`` so that callers never
reach for a global transport. The client is built once with the configured
timeouts and body-level logging hooks, then injected wherever it is needed.
"""

import logging

import httpx

from chainref.client.config import ClientConfig, get_client_config
from chainref.models.schemas import QueryRequest, QueryResult

logger = logging.getLogger(__name__)


async def _log_request(request: httpx.Request) -> None:
    logger.debug(f"--> {request.method} {request.url} {request.content.decode(errors='replace')}")


async def _log_response(response: httpx.Response) -> None:
    # Reading here buffers the body; raise_for_status and json still work after.
    await response.aread()
    request = response.request
    logger.debug(
        f"<-- {response.status_code} {response.reason_phrase} {request.method} "
        f"{request.url} {response.text}"
    )


def create_http_client(
    config: ClientConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the async HTTP client used to reach the backend.

    Args:
        config: Optional client configuration.
                Loads from environment if not provided.
        transport: Optional transport override (tests, ASGI apps).

    Returns:
        Configured AsyncClient. The caller owns it and must close it.
    """
    config = config or get_client_config()

    timeout = httpx.Timeout(
        config.connect_timeout,
        connect=config.connect_timeout,
        read=config.read_timeout,
        write=config.write_timeout,
    )

    event_hooks: dict[str, list] = {"request": [], "response": []}
    if config.log_bodies:
        event_hooks["request"].append(_log_request)
        event_hooks["response"].append(_log_response)

    return httpx.AsyncClient(
        base_url=config.base_url,
        timeout=timeout,
        headers={"Content-Type": "application/json"},
        event_hooks=event_hooks,
        transport=transport,
    )


class ChainApiClient:
    """Client for the backend question endpoint.

    Exposes one operation, ``ask``. Errors are not translated here:
    ``httpx.TransportError`` signals a network failure,
    ``httpx.HTTPStatusError`` a non-success status, and anything else
    (``pydantic.ValidationError`` for malformed bodies) an unexpected one.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        endpoint_path: str = "/askGemini",
    ) -> None:
        """Initialize the API client.

        Args:
            http_client: Preconfigured async HTTP client.
            endpoint_path: Resource path of the question endpoint.
        """
        self._http = http_client
        self._endpoint_path = endpoint_path

    @classmethod
    def from_config(
        cls,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ChainApiClient":
        """Create a client and its underlying HTTP client from configuration."""
        config = config or get_client_config()
        return cls(create_http_client(config, transport), config.endpoint_path)

    async def ask(self, request: QueryRequest) -> QueryResult:
        """Send a question and parse the chain answer.

        Args:
            request: Question and selected theme.

        Returns:
            The validated QueryResult.

        Raises:
            httpx.TransportError: Backend unreachable or timed out.
            httpx.HTTPStatusError: Backend answered with a failure status.
            pydantic.ValidationError: Body is not a valid QueryResult.
        """
        response = await self._http.post(
            self._endpoint_path,
            json=request.model_dump(by_alias=True),
        )
        response.raise_for_status()
        return QueryResult.model_validate_json(response.content)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()
