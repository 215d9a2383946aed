from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ViewState(str, Enum):
    """UI-distinguishable states derived from the controller signals."""

    IDLE = "idle"
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"
    ERROR = "error"


class QueryRequest(BaseModel):
    """Request payload for the backend ``askGemini`` endpoint.

    The question is sent as given. Blank questions are rejected by the UI
    before a request is ever built.

    Attributes:
        question: User's natural-language question.
        selected_theme: Thematic context label, opaque to the client.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str
    selected_theme: str = Field(..., alias="selectedTheme")


class CrossThemeConnection(BaseModel):
    """A passage relevant to a chain entry under a different theme.

    Attributes:
        theme: The alternate theme this connection relates to.
        reference: Locator of the connected passage.
        text: Content of the connected passage.
    """

    model_config = ConfigDict(frozen=True)

    theme: str
    reference: str
    text: str


class ChainEntry(BaseModel):
    """A single link in the returned chain.

    Attributes:
        order: Position of the entry as reported by the backend.
        reference: Locator of the source passage.
        text: Quoted passage content.
        linking_phrase: Why this entry connects to the next one.
        next_reference: Locator of the next passage, None for a terminal link.
        cross_theme_connections: Connections to passages under other themes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    order: int
    reference: str
    text: str
    linking_phrase: str = Field(..., alias="linkingPhrase")
    next_reference: str | None = Field(None, alias="nextVerse")
    cross_theme_connections: tuple[CrossThemeConnection, ...] = Field(
        default_factory=tuple, alias="crossThemeConnections"
    )

    @field_validator("cross_theme_connections", mode="before")
    @classmethod
    def null_connections_to_empty(cls, v: object) -> object:
        """Treat an explicit null the same as a missing list."""
        if v is None:
            return ()
        return v

    @property
    def is_terminal(self) -> bool:
        return self.next_reference is None


class QueryResult(BaseModel):
    """Full backend answer for a query.

    ``chain`` keeps the backend's array order. Use ``sorted_by_order`` only
    when the sequence has to be re-derived from the ``order`` values.

    Attributes:
        theme: Theme the backend resolved, may differ from the requested one.
        summary: Free-text synopsis of the answer.
        chain: Ordered chain entries, possibly empty.
    """

    model_config = ConfigDict(frozen=True)

    theme: str
    summary: str
    chain: tuple[ChainEntry, ...] = Field(default_factory=tuple)

    @field_validator("chain", mode="before")
    @classmethod
    def null_chain_to_empty(cls, v: object) -> object:
        """Treat an explicit null the same as a missing chain."""
        if v is None:
            return ()
        return v

    def sorted_by_order(self) -> tuple[ChainEntry, ...]:
        """Return the chain re-sequenced by ``order`` (stable for ties)."""
        return tuple(sorted(self.chain, key=lambda entry: entry.order))


def derive_view_state(
    result: QueryResult | None,
    loading: bool,
    error: str | None,
) -> ViewState:
    """Map the three controller signals onto a single UI state.

    Args:
        result: Current result signal value.
        loading: Current loading flag.
        error: Current error message.

    Returns:
        The ViewState the UI should render.
    """
    if loading:
        return ViewState.LOADING
    if error is not None:
        return ViewState.ERROR
    if result is None:
        return ViewState.IDLE
    if not result.chain:
        return ViewState.EMPTY
    return ViewState.POPULATED
