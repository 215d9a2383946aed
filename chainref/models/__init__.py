"""Pydantic models exchanged with the inference backend.

Provides type safety and validation of the chain-of-passages payload.

Models:
    - QueryRequest: Outgoing question and selected theme
    - QueryResult: Backend answer with summary and chain
    - ChainEntry: One linked passage in the chain
    - CrossThemeConnection: Passage related under another theme
    - ViewState: UI state derived from the controller signals
"""

from chainref.models.schemas import (
    ChainEntry,
    CrossThemeConnection,
    QueryRequest,
    QueryResult,
    ViewState,
    derive_view_state,
)

__all__ = [
    "ChainEntry",
    "CrossThemeConnection",
    "QueryRequest",
    "QueryResult",
    "ViewState",
    "derive_view_state",
]
