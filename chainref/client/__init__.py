"""Backend client for the inference service.

Responsibilities:
    - Environment-driven configuration of endpoint and timeouts
    - Construction of the async HTTP client with body-level logging
    - The single ``ask`` call that returns a validated QueryResult

Keeps transport concerns out of the query controller.
"""

from chainref.client.config import ClientConfig, UIConfig, get_client_config, get_ui_config
from chainref.client.http import ChainApiClient, create_http_client

__all__ = [
    "ChainApiClient",
    "ClientConfig",
    "UIConfig",
    "create_http_client",
    "get_client_config",
    "get_ui_config",
]
