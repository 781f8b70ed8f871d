from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from frame_promptly.core.domain.prompt.prompting_method import PromptingMethod


@dataclass(frozen=True)
class StageArtifact:
    """Output produced while working through one framework stage."""

    id: str
    stage_id: str
    content: str
    summary: str = ""
    tool_used: str = ""
    method: PromptingMethod | None = None
    raw_prompt: str = ""
    ai_response: str = ""
    version: int = 1
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
