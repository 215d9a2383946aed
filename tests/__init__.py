"""Test package for Chain Reference.

Structure:
    - unit/: Schema, config, client, signal and controller tests
    - integration/: Controller driven against the FastAPI sample backend

Backend responses are simulated with httpx transports, never a live service.
Leverages pytest with pytest-check for soft assertions.
"""
