"""Data models for dispatch results."""

import arrow
from pydantic import BaseModel, ConfigDict, Field


class ObserverFailure(BaseModel):
    """An observer that raised during a dispatch."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    observer: str
    plugin: str | None = None
    sequence: int
    error: Exception


class DispatchReport(BaseModel):
    """Outcome of a single dispatch."""

    event_name: str
    pending: bool = False
    invoked: int = 0
    failures: list[ObserverFailure] = Field(default_factory=list)
    dispatched_at: str = Field(default_factory=lambda: arrow.utcnow().isoformat())  # ISO 8601 UTC timestamp

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def succeeded(self) -> int:
        return self.invoked - self.failed
