from frame_promptly.core.domain.recommendation.ai_recommendation import (
    AIRecommendation,
    EstimatedImpact,
    RecommendationType,
)
from frame_promptly.core.domain.recommendation.recommendation_context import (
    Complexity,
    ProjectContext,
    RecommendationContext,
    SkillLevel,
    TeamSize,
    Timeline,
    UserHistory,
)

__all__ = [
    "AIRecommendation",
    "Complexity",
    "EstimatedImpact",
    "ProjectContext",
    "RecommendationContext",
    "RecommendationType",
    "SkillLevel",
    "TeamSize",
    "Timeline",
    "UserHistory",
]
