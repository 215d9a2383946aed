"""Main application entry point.

Runs FastAPI with the NiceGUI chain page mounted (port 8000 by default).
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    Set SAMPLE_BACKEND=1 to also serve the canned question endpoint at
    /sample/askGemini, and point CHAIN_API_BASE_URL at it for offline UI work.
    """
    import uvicorn
    from nicegui import ui

    from chainref.api.app import create_app
    from chainref.client.config import get_client_config, get_ui_config
    from chainref.client.http import ChainApiClient
    from chainref.ui.chain_page import register_page

    client_config = get_client_config()
    ui_config = get_ui_config()
    api_client = ChainApiClient.from_config(client_config)

    include_sample = os.getenv("SAMPLE_BACKEND", "").strip().lower() in {"1", "true", "yes"}
    app = create_app(api_client=api_client, include_sample_backend=include_sample)
    register_page(api_client, ui_config)

    ui.run_with(
        app,
        title=ui_config.title,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "chain-reference-secret"),
    )

    logger.info(f"Backend endpoint: {client_config.base_url} {client_config.endpoint_path}")
    logger.info("Chain page available at http://localhost:8000/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
