"""Query controller owning the single-query lifecycle.

Sits between the UI and the backend client. The UI calls ``submit`` and
renders from three signals: ``result``, ``loading`` and ``error``.

Lifecycle rules:

1. **Reset on submit** - ``submit`` publishes ``loading=True`` and clears
   ``result`` and ``error`` before the request is sent, so a stale answer is
   never shown next to a new in-flight query.

2. **Generation tagging** - every submit takes the next generation number.
   A call that settles after a newer submit has been made is discarded, so a
   slow earlier response cannot overwrite a faster later one. The earlier
   request is not cancelled at the transport level.

3. **Three failure kinds** - transport failures, failure statuses and
   everything else are reported as text on ``error``. No exception leaves the
   controller and ``loading`` is reset on every exit path.
"""

import asyncio
import logging
from enum import Enum

import httpx

from chainref.client.http import ChainApiClient
from chainref.controller.signals import Signal
from chainref.models.schemas import QueryRequest, QueryResult, ViewState, derive_view_state

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    """Failure categories and their user-visible message prefixes."""

    NETWORK = "Network error"
    SERVER = "Server error"
    UNEXPECTED = "Unexpected error"


def classify_failure(exc: Exception) -> FailureKind:
    """Return the failure kind for an exception raised by the backend call."""
    if isinstance(exc, httpx.HTTPStatusError):
        return FailureKind.SERVER
    if isinstance(exc, httpx.TransportError):
        return FailureKind.NETWORK
    return FailureKind.UNEXPECTED


def describe_failure(exc: Exception) -> str:
    """Build the user-visible error message for a failed call.

    Args:
        exc: Exception raised while asking the backend.

    Returns:
        Message such as ``"Server error: 500 Internal Server Error"``.
    """
    kind = classify_failure(exc)
    if kind is FailureKind.SERVER:
        response = exc.response  # type: ignore[attr-defined]
        return f"{kind.value}: {response.status_code} {response.reason_phrase}".rstrip()
    # Some httpx errors (timeouts) carry an empty message
    detail = str(exc) or type(exc).__name__
    return f"{kind.value}: {detail}"


class QueryController:
    """Mediates one externally visible query at a time.

    Signals:
        result: Last successful QueryResult, or None.
        loading: True from submit until the latest call settles.
        error: Message describing the latest failure, or None.
    """

    def __init__(self, api_client: ChainApiClient) -> None:
        """Initialize the controller.

        Args:
            api_client: Backend client used for every submitted query.
        """
        self._api_client = api_client
        self._generation = 0
        self._tasks: set[asyncio.Task[None]] = set()

        self.result: Signal[QueryResult | None] = Signal("result", None)
        self.loading: Signal[bool] = Signal("loading", False)
        self.error: Signal[str | None] = Signal("error", None)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def view_state(self) -> ViewState:
        return derive_view_state(self.result.value, self.loading.value, self.error.value)

    def submit(self, question: str, theme: str) -> asyncio.Task[None]:
        """Start a query for ``question`` under ``theme``.

        Must be called from a running event loop. The question is not
        validated here; the UI rejects blank input before calling. Input
        the request model rejects is reported as an unexpected error.

        Args:
            question: The user's question.
            theme: Selected theme label.

        Returns:
            Task that completes once the call has settled. Callers may ignore it.

        Raises:
            RuntimeError: No running event loop. Signals are left untouched.
        """
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        logger.info(f"Submitting query #{generation} (theme={theme!r})")

        self._publish(result=None, loading=True, error=None)

        task = loop.create_task(self._run(generation, question, theme))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, generation: int, question: str, theme: str) -> None:
        result: QueryResult | None = None
        error: str | None = None
        try:
            request = QueryRequest(question=question, selected_theme=theme)
            result = await self._api_client.ask(request)
        except Exception as e:
            error = describe_failure(e)
            if self._is_current(generation):
                logger.warning(f"Query #{generation} failed: {error}")
        finally:
            if self._is_current(generation):
                self._publish(result=result, loading=False, error=error)
            else:
                logger.debug(
                    f"Discarding stale query #{generation} (latest is #{self._generation})"
                )

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _publish(
        self,
        *,
        result: QueryResult | None,
        loading: bool,
        error: str | None,
    ) -> None:
        """Write all three signals, then notify observers of the changed ones."""
        changed = [
            signal
            for signal, value in (
                (self.result, result),
                (self.loading, loading),
                (self.error, error),
            )
            if signal._set(value)
        ]
        for signal in changed:
            signal._notify()
