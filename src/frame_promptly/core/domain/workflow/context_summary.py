from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum


class SummaryLength(StrEnum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


@dataclass(frozen=True)
class ContextSummary:
    id: str
    source_stage_id: str
    summary: str
    key_insights: tuple[str, ...] = field(default_factory=tuple)
    actionable_items: tuple[str, ...] = field(default_factory=tuple)
    method: str = "automatic"
    length: SummaryLength = SummaryLength.MEDIUM
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
