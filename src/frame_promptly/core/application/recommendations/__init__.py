from frame_promptly.core.application.recommendations.ai_tool_directory import (
    AIToolSuggestion,
    recommend_ai_tools,
)
from frame_promptly.core.application.recommendations.recommendation_engine import (
    RecommendationEngine,
    clamp_confidence,
    rank,
)

__all__ = [
    "AIToolSuggestion",
    "RecommendationEngine",
    "clamp_confidence",
    "rank",
    "recommend_ai_tools",
]
