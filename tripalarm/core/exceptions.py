# tripalarm/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidInterval(CoreError):
    """Raised when an AlarmInterval is constructed with invalid bounds."""


class InvalidChannelSeries(CoreError):
    """Raised when a ChannelSeries is constructed with invalid inputs."""


class InvalidTripRecord(CoreError):
    """Raised when a TripRecord is constructed with invalid inputs."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class ChannelNotFound(CoreError, KeyError):
    """Raised when a requested channel name is not present."""


# ---- Processing errors ----
class ProcessingError(CoreError):
    """Raised when processing a trip fails; `stage` names the failing pass."""

    stage: str = "unknown"

    def __init__(self, message: str, *, channel: str | None = None) -> None:
        super().__init__(message)
        self.channel = channel

    def __str__(self) -> str:
        base = super().__str__()
        if self.channel is None:
            return f"[{self.stage}] {base}"
        return f"[{self.stage}] channel '{self.channel}': {base}"


class EventProcessingError(ProcessingError):
    """Raised when the event log cannot be turned into intervals."""

    stage = "events"


class RawScanError(ProcessingError):
    """Raised when the raw measurement scan fails."""

    stage = "raw_scan"
