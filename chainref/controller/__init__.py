"""Query lifecycle management.

Responsibilities:
    - Issuing the backend call for each submitted question
    - Publishing result, loading and error signals to the UI
    - Discarding responses that belong to superseded submits
    - Mapping failures onto network, server and unexpected messages
"""

from chainref.controller.query_controller import (
    FailureKind,
    QueryController,
    classify_failure,
    describe_failure,
)
from chainref.controller.signals import Signal

__all__ = [
    "FailureKind",
    "QueryController",
    "Signal",
    "classify_failure",
    "describe_failure",
]
