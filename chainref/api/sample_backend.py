"""Sample question endpoint for local development.

Serves a canned chain in the same wire format as the real backend so the
UI and controller can be exercised without network access to it.
"""

import logging

from fastapi import APIRouter

from chainref.models.schemas import (
    ChainEntry,
    CrossThemeConnection,
    QueryRequest,
    QueryResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sample", tags=["sample"])

# Questions containing this marker get an answer with an empty chain
EMPTY_CHAIN_MARKER = "#empty"


def build_sample_result(request: QueryRequest) -> QueryResult:
    """Build a deterministic two-link chain for a request.

    Args:
        request: The incoming question and theme.

    Returns:
        QueryResult echoing the requested theme.
    """
    if EMPTY_CHAIN_MARKER in request.question:
        return QueryResult(
            theme=request.selected_theme,
            summary="No passages matched the question.",
        )

    return QueryResult(
        theme=request.selected_theme,
        summary=f"Sample chain for: {request.question}",
        chain=(
            ChainEntry(
                order=1,
                reference="Genesis 2:2-3",
                text="And on the seventh day God ended his work which he had made.",
                linking_phrase="The rest established at creation is later commanded.",
                next_reference="Exodus 20:8",
            ),
            ChainEntry(
                order=2,
                reference="Exodus 20:8",
                text="Remember the sabbath day, to keep it holy.",
                linking_phrase="The commandment closes the chain.",
                next_reference=None,
                cross_theme_connections=(
                    CrossThemeConnection(
                        theme="Grace",
                        reference="Hebrews 4:9-10",
                        text="There remaineth therefore a rest to the people of God.",
                    ),
                ),
            ),
        ),
    )


@router.post("/askGemini", response_model=QueryResult, response_model_by_alias=True)
async def ask_sample(payload: QueryRequest) -> QueryResult:
    """Answer a question with the sample chain.

    Args:
        payload: Question and selected theme (JSON body).

    Returns:
        QueryResult in the backend wire format.

    Raises:
        422: Body does not match QueryRequest.
    """
    logger.info(f"Sample backend answering theme={payload.selected_theme!r}")
    return build_sample_result(payload)
