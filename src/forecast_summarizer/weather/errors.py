"""Exception hierarchy for the forecast pipeline."""

from __future__ import annotations

from enum import Enum


class ForecastSummarizerError(Exception):
    pass


class StageError(ForecastSummarizerError):
    """A pipeline stage failed; ``kind`` tells the failure variants apart."""

    def __init__(self, kind: Enum, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


class GeocodeError(StageError):
    class Kind(Enum):
        NO_MATCH = "no_match"
        TRANSPORT = "transport"


class LocatorError(StageError):
    class Kind(Enum):
        NOT_FOUND = "not_found"
        TRANSPORT = "transport"


class FetchError(StageError):
    class Kind(Enum):
        EMPTY = "empty"
        TRANSPORT = "transport"
        DECODE = "decode"


class SummarizeError(StageError):
    class Kind(Enum):
        SERVICE_ERROR = "service_error"


class PipelineFailure(ForecastSummarizerError):
    """Terminal failure of one request, safe to show to the caller."""

    def __init__(self, reason: str, status_code: int) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason)
