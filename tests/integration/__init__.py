"""Integration tests for end-to-end query flows.

Drives the QueryController through the real HTTP client against the
FastAPI sample backend over ASGITransport.
"""
