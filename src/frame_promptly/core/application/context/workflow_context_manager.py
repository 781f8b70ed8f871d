from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict
from datetime import datetime
from typing import Any

from frame_promptly.core.domain.prompt import PromptingMethod
from frame_promptly.core.domain.workflow import ContextSummary, StageArtifact, SummaryLength

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")

INSIGHT_INDICATORS = (
    "key finding",
    "important",
    "discovered",
    "revealed",
    "insight",
    "pattern",
    "trend",
)
ACTION_INDICATORS = (
    "should",
    "need to",
    "must",
    "recommend",
    "suggest",
    "next step",
    "action",
    "implement",
)
MAX_INSIGHTS = 5
MAX_ACTIONS = 3
SUMMARY_SENTENCES = {
    SummaryLength.SHORT: 2,
    SummaryLength.MEDIUM: 4,
    SummaryLength.LONG: 8,
}


class WorkflowContextManager:
    """
    Per-workflow store of stage artifacts and their automatic summaries.
    Summaries feed the ``context`` slot of prompts for later stages.
    """

    def __init__(self) -> None:
        self._artifacts: dict[str, StageArtifact] = {}
        self._summaries: dict[str, ContextSummary] = {}
        self._workflow_context: dict[str, Any] = {}

    # ── Artifacts ─────────────────────────────────────────────────

    def store_artifact(self, stage_id: str, artifact: StageArtifact) -> ContextSummary:
        self._artifacts[stage_id] = artifact
        summary = self.summarize(stage_id, artifact.content)
        self._summaries[stage_id] = summary
        return summary

    def get_artifact(self, stage_id: str) -> StageArtifact | None:
        return self._artifacts.get(stage_id)

    def all_artifacts(self) -> list[StageArtifact]:
        return list(self._artifacts.values())

    def get_summary(self, stage_id: str) -> ContextSummary | None:
        return self._summaries.get(stage_id)

    # ── Summaries ─────────────────────────────────────────────────

    @staticmethod
    def summarize(
        stage_id: str, content: str, length: SummaryLength = SummaryLength.MEDIUM
    ) -> ContextSummary:
        sentences = _sentences(content)
        return ContextSummary(
            id=f"summary-{stage_id}",
            source_stage_id=stage_id,
            summary=_leading_sentences(sentences, length),
            key_insights=_matching(sentences, INSIGHT_INDICATORS, MAX_INSIGHTS),
            actionable_items=_matching(sentences, ACTION_INDICATORS, MAX_ACTIONS),
            length=length,
        )

    # ── Context chaining ──────────────────────────────────────────

    def build_context_chain(self, stage_ids: list[str]) -> str:
        parts: list[str] = []
        for stage_id in stage_ids:
            summary = self._summaries.get(stage_id)
            if summary is None:
                continue
            parts.append(f"Stage {stage_id}: {summary.summary}")
            if summary.key_insights:
                parts.append(f"Key insights: {'; '.join(summary.key_insights)}")
        return "\n\n".join(parts)

    def context_for_stage(self, stage_id: str, prior_stage_ids: list[str]) -> str:
        parts = [
            f"From {prior}: {self._summaries[prior].summary}"
            for prior in prior_stage_ids
            if prior in self._summaries and prior != stage_id
        ]
        return "\n".join(parts)

    # ── Workflow key/value context ────────────────────────────────

    def set_workflow_context(self, key: str, value: Any) -> None:
        self._workflow_context[key] = value

    def get_workflow_context(self, key: str) -> Any:
        return self._workflow_context.get(key)

    def all_workflow_context(self) -> dict[str, Any]:
        return dict(self._workflow_context)

    # ── Persistence ───────────────────────────────────────────────

    def export_context(self) -> str:
        return json.dumps(
            {
                "artifacts": {k: asdict(v) for k, v in self._artifacts.items()},
                "summaries": {k: asdict(v) for k, v in self._summaries.items()},
                "workflowContext": self._workflow_context,
            },
            default=_json_default,
        )

    def import_context(self, payload: str) -> bool:
        """Replace the store with an exported snapshot. Malformed input leaves it untouched."""
        try:
            data = json.loads(payload)
            artifacts = {k: _artifact_from_dict(v) for k, v in data.get("artifacts", {}).items()}
            summaries = {k: _summary_from_dict(v) for k, v in data.get("summaries", {}).items()}
            workflow_context = dict(data.get("workflowContext", {}))
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            logger.error("Failed to import context data: %s", exc)
            return False

        self._artifacts = artifacts
        self._summaries = summaries
        self._workflow_context = workflow_context
        return True

    # ── Cleanup ───────────────────────────────────────────────────

    def clear(self) -> None:
        self._artifacts.clear()
        self._summaries.clear()
        self._workflow_context.clear()

    def remove_stage_context(self, stage_id: str) -> None:
        self._artifacts.pop(stage_id, None)
        self._summaries.pop(stage_id, None)


def _sentences(content: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_SPLIT.split(content or "") if s.strip()]


def _matching(sentences: list[str], indicators: tuple[str, ...], limit: int) -> tuple[str, ...]:
    found = [s for s in sentences if any(i in s.lower() for i in indicators)]
    return tuple(found[:limit])


def _leading_sentences(sentences: list[str], length: SummaryLength) -> str:
    if not sentences:
        return ""
    return ". ".join(sentences[: SUMMARY_SENTENCES[length]]) + "."


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _artifact_from_dict(data: dict[str, Any]) -> StageArtifact:
    fields = dict(data)
    if fields.get("method"):
        fields["method"] = PromptingMethod(fields["method"])
    if fields.get("created_at"):
        fields["created_at"] = datetime.fromisoformat(fields["created_at"])
    return StageArtifact(**fields)


def _summary_from_dict(data: dict[str, Any]) -> ContextSummary:
    fields = dict(data)
    fields["key_insights"] = tuple(fields.get("key_insights", ()))
    fields["actionable_items"] = tuple(fields.get("actionable_items", ()))
    fields["length"] = SummaryLength(fields.get("length", SummaryLength.MEDIUM))
    if fields.get("created_at"):
        fields["created_at"] = datetime.fromisoformat(fields["created_at"])
    return ContextSummary(**fields)
