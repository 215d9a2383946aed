"""Backend client configuration with environment variable loading.

Pydantic-based configuration for the HTTP client that talks to the
inference backend. Timeouts default to 30s connect, 60s read, 30s write.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://us-central1-link-a-verse-backend.cloudfunctions.net/"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Configuration for the backend HTTP client.

    Attributes:
        base_url: Backend base URL.
        endpoint_path: Resource path of the question endpoint.
        connect_timeout: Seconds to wait for a connection.
        read_timeout: Seconds to wait for response data.
        write_timeout: Seconds to wait while sending the request body.
        log_bodies: Log request and response bodies at DEBUG level.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("CHAIN_API_BASE_URL", DEFAULT_BASE_URL),
        description="Backend base URL",
    )
    endpoint_path: str = Field(
        default_factory=lambda: os.getenv("CHAIN_API_PATH", "/askGemini"),
        description="Resource path of the question endpoint",
    )
    connect_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAIN_API_CONNECT_TIMEOUT", "30")),
        gt=0.0,
        description="Connect timeout in seconds",
    )
    read_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAIN_API_READ_TIMEOUT", "60")),
        gt=0.0,
        description="Read timeout in seconds",
    )
    write_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAIN_API_WRITE_TIMEOUT", "30")),
        gt=0.0,
        description="Write timeout in seconds",
    )
    log_bodies: bool = Field(
        default_factory=lambda: _env_flag("CHAIN_API_LOG_BODIES", "true"),
        description="Log request and response bodies for diagnostics",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate that the base URL is a non-empty http(s) URL."""
        v = v.strip()
        if not v:
            raise ValueError("Base URL required. Set CHAIN_API_BASE_URL in .env")
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v


class UIConfig(BaseModel):
    """Configuration for the chain reference page.

    Attributes:
        title: Page and header title.
        default_theme: Theme preselected in the theme field.
    """

    title: str = Field(default_factory=lambda: os.getenv("APP_TITLE", "Link-A-Verse"))
    default_theme: str = Field(
        default_factory=lambda: os.getenv("DEFAULT_THEME", "Sabbath"),
    )


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If the base URL is blank or malformed.
    """
    return ClientConfig()


def get_ui_config() -> UIConfig:
    """Create UI configuration from environment."""
    return UIConfig()
