from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Complexity(StrEnum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class Timeline(StrEnum):
    TIGHT = "tight"
    MODERATE = "moderate"
    FLEXIBLE = "flexible"


class TeamSize(StrEnum):
    SOLO = "solo"
    SMALL = "small"
    LARGE = "large"


class SkillLevel(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


@dataclass(frozen=True)
class ProjectContext:
    domain: str = ""
    complexity: Complexity = Complexity.MEDIUM
    timeline: Timeline = Timeline.MODERATE
    team_size: TeamSize = TeamSize.SMALL


@dataclass(frozen=True)
class UserHistory:
    preferred_methods: frozenset[str] = field(default_factory=frozenset)
    skill_level: SkillLevel = SkillLevel.INTERMEDIATE
    past_frameworks: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RecommendationContext:
    """Read-only descriptor of where the user stands; the engine never mutates it."""

    current_framework: str | None = None
    current_stage: str | None = None
    completed_stages: frozenset[str] = field(default_factory=frozenset)
    project_context: ProjectContext | None = None
    user_history: UserHistory | None = None

    @property
    def skill_level(self) -> SkillLevel:
        if self.user_history is None:
            return SkillLevel.INTERMEDIATE
        return self.user_history.skill_level

    @property
    def timeline(self) -> Timeline | None:
        return self.project_context.timeline if self.project_context else None
