from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RecommendationType(StrEnum):
    STAGE = "stage"
    TOOL = "tool"
    TEMPLATE = "template"
    METHOD = "method"


class EstimatedImpact(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class AIRecommendation:
    type: RecommendationType
    title: str
    description: str
    confidence: float
    rationale: str
    target_id: str
    category: str
    estimated_impact: EstimatedImpact
