"""FastAPI application hosting the chain reference UI.

Endpoints:
    - GET /health: Service health status
    - POST /sample/askGemini: Canned chain answer (development only)
"""

from chainref.api.app import create_app

__all__ = ["create_app"]
