from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LOG_LEVELS: frozenset[str] = frozenset({"debug", "info", "warning", "error"})


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One store event: a lowercase level, a dotted event name and the keys it touched.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")
        if self.level not in LOG_LEVELS:
            raise ValueError(f"LogMessage.level must be one of {sorted(LOG_LEVELS)}, got {self.level!r}")
