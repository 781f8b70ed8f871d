from __future__ import annotations

from datetime import datetime

from pydantic import Field

from frame_promptly.core.application.recommendations import AIToolSuggestion
from frame_promptly.core.domain.prompt import PromptingMethod
from frame_promptly.core.domain.recommendation import (
    AIRecommendation,
    Complexity,
    EstimatedImpact,
    ProjectContext,
    RecommendationContext,
    RecommendationType,
    SkillLevel,
    TeamSize,
    Timeline,
    UserHistory,
)
from frame_promptly.core.domain.workflow import StageArtifact, Workflow, WorkflowStage
from frame_promptly.infrastructure.entrypoints.api.dtos.base_dto import CamelModel


class ProjectContextDTO(CamelModel):
    domain: str = ""
    complexity: Complexity = Complexity.MEDIUM
    timeline: Timeline = Timeline.MODERATE
    team_size: TeamSize = TeamSize.SMALL


class UserHistoryDTO(CamelModel):
    preferred_methods: list[str] = Field(default_factory=list)
    skill_level: SkillLevel = SkillLevel.INTERMEDIATE
    past_frameworks: list[str] = Field(default_factory=list)


class RecommendationContextDTO(CamelModel):
    current_framework: str | None = None
    current_stage: str | None = None
    completed_stages: list[str] = Field(default_factory=list)
    project_context: ProjectContextDTO | None = None
    user_history: UserHistoryDTO | None = None

    def to_domain(self) -> RecommendationContext:
        project = None
        if self.project_context is not None:
            project = ProjectContext(**self.project_context.model_dump())
        history = None
        if self.user_history is not None:
            history = UserHistory(
                preferred_methods=frozenset(self.user_history.preferred_methods),
                skill_level=self.user_history.skill_level,
                past_frameworks=tuple(self.user_history.past_frameworks),
            )
        return RecommendationContext(
            current_framework=self.current_framework,
            current_stage=self.current_stage,
            completed_stages=frozenset(self.completed_stages),
            project_context=project,
            user_history=history,
        )


class WorkflowStageDTO(CamelModel):
    id: str
    framework_stage_id: str
    order: int
    is_completed: bool = False
    is_skipped: bool = False


class WorkflowDTO(CamelModel):
    id: str
    name: str
    framework_type: str
    stages: list[WorkflowStageDTO] = Field(default_factory=list)
    description: str = ""

    def to_domain(self) -> Workflow:
        return Workflow(
            id=self.id,
            name=self.name,
            framework_type=self.framework_type,
            stages=tuple(WorkflowStage(**s.model_dump()) for s in self.stages),
            description=self.description,
        )


class StageArtifactDTO(CamelModel):
    id: str
    stage_id: str
    content: str
    summary: str = ""
    tool_used: str = ""
    method: PromptingMethod | None = None
    raw_prompt: str = ""
    ai_response: str = ""
    version: int = 1
    created_at: datetime | None = None

    def to_domain(self) -> StageArtifact:
        fields = self.model_dump(exclude={"created_at"})
        if self.created_at is not None:
            fields["created_at"] = self.created_at
        return StageArtifact(**fields)


class ContextRequestDTO(CamelModel):
    context: RecommendationContextDTO = Field(default_factory=RecommendationContextDTO)


class NextStageRequestDTO(ContextRequestDTO):
    workflow: WorkflowDTO


class ToolsRequestDTO(ContextRequestDTO):
    stage_id: str
    framework_type: str


class TemplatesRequestDTO(ContextRequestDTO):
    tool_id: str = ""


class MethodsRequestDTO(ContextRequestDTO):
    template_id: str | None = None


class ArtifactsRequestDTO(CamelModel):
    artifacts: list[StageArtifactDTO] = Field(default_factory=list)


class AIToolsRequestDTO(CamelModel):
    framework: str = ""
    stage: str = ""
    ux_tool: str = ""


class AIRecommendationDTO(CamelModel):
    type: RecommendationType
    title: str
    description: str
    confidence: float
    rationale: str
    target_id: str
    category: str
    estimated_impact: EstimatedImpact

    @classmethod
    def from_domain(cls, recommendation: AIRecommendation) -> AIRecommendationDTO:
        return cls(
            type=recommendation.type,
            title=recommendation.title,
            description=recommendation.description,
            confidence=recommendation.confidence,
            rationale=recommendation.rationale,
            target_id=recommendation.target_id,
            category=recommendation.category,
            estimated_impact=recommendation.estimated_impact,
        )


class AIToolSuggestionDTO(CamelModel):
    name: str
    description: str
    best_for: list[str]

    @classmethod
    def from_domain(cls, suggestion: AIToolSuggestion) -> AIToolSuggestionDTO:
        return cls(name=suggestion.name, description=suggestion.description, best_for=list(suggestion.best_for))
