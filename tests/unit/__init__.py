"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation of the chain payload
    - client/: Configuration and HTTP client behavior
    - controller/: Signals, lifecycle and failure mapping

The backend is replaced by httpx.MockTransport handlers.
"""
