"""Chain Reference - themed question answering over linked passages.

Combines httpx for backend calls, Pydantic for payload validation,
FastAPI for hosting, and NiceGUI for the browser page.

Components:
    - models: Request/response schemas for the chain payload
    - client: Backend configuration and HTTP client
    - controller: Query lifecycle and observable signals
    - api: FastAPI application and sample backend
    - ui: Web page driving the controller
"""

__version__ = "0.1.0"
