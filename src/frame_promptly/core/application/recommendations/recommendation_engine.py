from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from frame_promptly.core.application.prompting.template_library import TemplateLibrary
from frame_promptly.core.domain.catalog import (
    Difficulty,
    FrameworkCatalog,
    FrameworkStage,
    UXTool,
)
from frame_promptly.core.domain.prompt import PromptingMethod, PromptTemplate
from frame_promptly.core.domain.recommendation import (
    AIRecommendation,
    Complexity,
    EstimatedImpact,
    RecommendationContext,
    RecommendationType,
    SkillLevel,
    TeamSize,
    Timeline,
)
from frame_promptly.core.domain.workflow import StageArtifact, Workflow

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0
TOOL_THRESHOLD = 0.3
TEMPLATE_THRESHOLD = 0.4


def clamp_confidence(value: float) -> float:
    """Bound a heuristic score to [0.1, 1.0], rounded to absorb float noise."""
    return round(max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value)), 2)


def rank(recommendations: Iterable[AIRecommendation]) -> list[AIRecommendation]:
    """Descending by confidence; ties keep their original order."""
    return sorted(recommendations, key=lambda r: r.confidence, reverse=True)


class RecommendationEngine:
    """Scores catalog entries against a RecommendationContext.

    Every method is total: sparse or unknown input yields defaults or an
    empty list, never an exception.
    """

    def __init__(self, catalog: FrameworkCatalog, library: TemplateLibrary | None = None):
        self.catalog = catalog
        self.library = library or TemplateLibrary()

    # ── Frameworks ────────────────────────────────────────────────

    def recommend_framework(self, context: RecommendationContext) -> list[AIRecommendation]:
        project = context.project_context
        if project is None:
            return self._default_framework_recommendations()

        domain = (project.domain or "").lower()
        recommendations: list[AIRecommendation] = []

        if project.timeline == Timeline.TIGHT:
            recommendations.append(
                _framework_recommendation(
                    "google-design-sprint",
                    "Google Design Sprint",
                    "Perfect for tight timelines - get results in just 5 days",
                    0.9,
                    "Google Design Sprint is specifically designed for rapid decision-making "
                    "and validation within a week",
                    EstimatedImpact.HIGH,
                )
            )

        if project.complexity == Complexity.COMPLEX or "enterprise" in domain:
            recommendations.append(
                _framework_recommendation(
                    "double-diamond",
                    "Double Diamond",
                    "Comprehensive approach for complex problems",
                    0.85,
                    "Double Diamond provides thorough exploration and definition phases "
                    "ideal for complex challenges",
                    EstimatedImpact.HIGH,
                )
            )

        if project.team_size == TeamSize.LARGE or "agile" in domain:
            recommendations.append(
                _framework_recommendation(
                    "agile-ux",
                    "Agile UX",
                    "Integrates seamlessly with development cycles",
                    0.8,
                    "Agile UX is designed for cross-functional teams and iterative development",
                    EstimatedImpact.MEDIUM,
                )
            )

        return rank(recommendations)

    @staticmethod
    def _default_framework_recommendations() -> list[AIRecommendation]:
        return [
            _framework_recommendation(
                "design-thinking",
                "Design Thinking",
                "Great starting point for human-centered innovation",
                0.8,
                "Most versatile framework suitable for various project types",
                EstimatedImpact.HIGH,
            ),
            _framework_recommendation(
                "double-diamond",
                "Double Diamond",
                "Structured approach for thorough problem exploration",
                0.7,
                "Provides clear divergent and convergent thinking phases",
                EstimatedImpact.MEDIUM,
            ),
        ]

    # ── Stages ────────────────────────────────────────────────────

    def recommend_next_stage(
        self, workflow: Workflow, context: RecommendationContext
    ) -> list[AIRecommendation]:
        framework = self.catalog.get_framework(workflow.framework_type)
        if framework is None:
            logger.debug("No catalog entry for framework %s", workflow.framework_type)
            return []

        completed = workflow.completed_stage_ids | context.completed_stages
        stages = framework.ordered_stages()

        recommendations = []
        for index, stage in enumerate(stages):
            if stage.id in completed:
                continue
            if not all(prior.id in completed for prior in stages[:index]):
                continue
            recommendations.append(
                AIRecommendation(
                    type=RecommendationType.STAGE,
                    title=f"Next: {stage.name}",
                    description=stage.description,
                    confidence=self._stage_confidence(stage, context, len(completed)),
                    rationale=self._stage_rationale(stage, context),
                    target_id=stage.id,
                    category="next-stage",
                    estimated_impact=self._stage_impact(stage),
                )
            )
        return rank(recommendations)

    @staticmethod
    def _stage_confidence(
        stage: FrameworkStage, context: RecommendationContext, completed_count: int
    ) -> float:
        confidence = 0.7
        if context.skill_level == SkillLevel.BEGINNER and stage.order == 1:
            confidence += 0.2
        if len(stage.input_requirements) > completed_count:
            confidence -= 0.3
        return clamp_confidence(confidence)

    @staticmethod
    def _stage_rationale(stage: FrameworkStage, context: RecommendationContext) -> str:
        if stage.order == 1:
            reasons = ["This is the logical starting point"]
        else:
            reasons = ["Previous stages provide the necessary foundation"]

        if stage.expected_outputs:
            reasons.append(f"Will produce {len(stage.expected_outputs)} key deliverables")

        if context.timeline == Timeline.TIGHT and "day" in stage.recommended_duration:
            reasons.append("Fits within your timeline constraints")

        return ". ".join(reasons) + "."

    @staticmethod
    def _stage_impact(stage: FrameworkStage) -> EstimatedImpact:
        if stage.order <= 2:
            return EstimatedImpact.HIGH
        if len(stage.expected_outputs) >= 3:
            return EstimatedImpact.HIGH
        if stage.expected_outputs:
            return EstimatedImpact.MEDIUM
        return EstimatedImpact.LOW

    # ── Tools ─────────────────────────────────────────────────────

    def recommend_tools(
        self, stage_id: str, framework_type: str, context: RecommendationContext
    ) -> list[AIRecommendation]:
        stage = self.catalog.get_stage(framework_type, stage_id)
        if stage is None:
            return []

        recommendations = []
        for tool in stage.tools:
            confidence = self._tool_confidence(tool, context)
            if confidence <= TOOL_THRESHOLD:
                continue
            recommendations.append(
                AIRecommendation(
                    type=RecommendationType.TOOL,
                    title=tool.name,
                    description=tool.description,
                    confidence=confidence,
                    rationale=self._tool_rationale(tool),
                    target_id=tool.id,
                    category=tool.category,
                    estimated_impact=_DIFFICULTY_IMPACT.get(tool.difficulty, EstimatedImpact.LOW),
                )
            )
        return rank(recommendations)

    @staticmethod
    def _tool_confidence(tool: UXTool, context: RecommendationContext) -> float:
        confidence = 0.6
        skill = context.skill_level

        if tool.difficulty == Difficulty.BEGINNER and skill == SkillLevel.BEGINNER:
            confidence += 0.3
        if tool.difficulty == Difficulty.ADVANCED and skill == SkillLevel.EXPERT:
            confidence += 0.2
        if tool.difficulty == Difficulty.ADVANCED and skill == SkillLevel.BEGINNER:
            confidence -= 0.4

        if context.timeline == Timeline.TIGHT:
            estimate = (tool.estimated_time or "").lower()
            if "hour" in estimate:
                confidence += 0.2
            if "week" in estimate:
                confidence -= 0.3

        return clamp_confidence(confidence)

    @staticmethod
    def _tool_rationale(tool: UXTool) -> str:
        reasons = [f"{tool.category} tool for {tool.difficulty} level"]
        if tool.estimated_time:
            reasons.append(f"Estimated time: {tool.estimated_time}")
        if tool.artifacts:
            reasons.append(f"Produces {len(tool.artifacts)} useful artifacts")
        return ". ".join(reasons) + "."

    # ── Templates ─────────────────────────────────────────────────

    def recommend_prompt_templates(
        self, tool_id: str, context: RecommendationContext
    ) -> list[AIRecommendation]:
        recommendations = []
        for template in self.library.templates():
            relevance = self._template_relevance(template, tool_id, context)
            if relevance <= TEMPLATE_THRESHOLD:
                continue
            recommendations.append(
                AIRecommendation(
                    type=RecommendationType.TEMPLATE,
                    title=template.name,
                    description=template.description,
                    confidence=relevance,
                    rationale=(
                        f"This template is well-suited for {template.category.lower()} activities"
                    ),
                    target_id=template.id,
                    category=template.category,
                    estimated_impact=EstimatedImpact.MEDIUM,
                )
            )
        return rank(recommendations)

    @staticmethod
    def _template_relevance(
        template: PromptTemplate, tool_id: str, context: RecommendationContext
    ) -> float:
        relevance = 0.4
        tool = (tool_id or "").lower()
        if tool:
            head = tool.split("-")[0]
            if any(tag in tool or head in tag for tag in template.tags):
                relevance += 0.3

        preferred = context.user_history.preferred_methods if context.user_history else frozenset()
        if template.method in preferred:
            relevance += 0.2

        return clamp_confidence(relevance)

    # ── Prompting methods ─────────────────────────────────────────

    def recommend_prompt_methods(
        self, template_id: str | None, context: RecommendationContext
    ) -> list[AIRecommendation]:
        skill = context.skill_level
        scored = [
            (
                PromptingMethod.INSTRUCTION_TUNING,
                0.8,
                "Provides clear, structured guidance for UX tasks",
            ),
            (
                PromptingMethod.FEW_SHOT,
                0.9 if skill == SkillLevel.BEGINNER else 0.7,
                "Examples help understand expected output format",
            ),
            (
                PromptingMethod.CHAIN_OF_THOUGHT,
                0.8 if skill == SkillLevel.EXPERT else 0.6,
                "Step-by-step reasoning for complex problems",
            ),
            (
                PromptingMethod.ZERO_SHOT,
                0.7 if skill == SkillLevel.EXPERT else 0.4,
                "Direct approach for experienced practitioners",
            ),
            (
                PromptingMethod.ROLE_PLAYING,
                0.7 if skill == SkillLevel.INTERMEDIATE else 0.6,
                "A persona frame keeps answers grounded in a practitioner's point of view",
            ),
            (
                PromptingMethod.STEP_BY_STEP,
                0.8 if skill == SkillLevel.BEGINNER else 0.5,
                "Labeled phases make the output easy to follow and apply",
            ),
        ]
        logger.debug("Scoring prompting methods for template %s", template_id)

        return rank(
            AIRecommendation(
                type=RecommendationType.METHOD,
                title=method.display_name,
                description=f"Use {method} prompting approach",
                confidence=clamp_confidence(confidence),
                rationale=rationale,
                target_id=method.value,
                category="prompt-method",
                estimated_impact=EstimatedImpact.MEDIUM,
            )
            for method, confidence, rationale in scored
        )

    # ── Artifacts ─────────────────────────────────────────────────

    def recommend_based_on_artifacts(
        self, artifacts: Sequence[StageArtifact]
    ) -> list[AIRecommendation]:
        if not artifacts:
            return [
                AIRecommendation(
                    type=RecommendationType.STAGE,
                    title="Start with Research",
                    description="Begin by understanding your users through interviews or surveys",
                    confidence=0.9,
                    rationale="User research is the foundation of good UX design",
                    target_id="empathize",
                    category="getting-started",
                    estimated_impact=EstimatedImpact.HIGH,
                )
            ]

        contents = [(a.content or "").lower() for a in artifacts]
        has_research = any("user" in c or "research" in c for c in contents)
        has_prototype = any("prototype" in c or "design" in c for c in contents)

        recommendations = []
        if has_research and not has_prototype:
            recommendations.append(
                AIRecommendation(
                    type=RecommendationType.STAGE,
                    title="Move to Prototyping",
                    description=(
                        "You have good research insights - time to create tangible solutions"
                    ),
                    confidence=0.85,
                    rationale="Research phase appears complete, prototyping is the logical next step",
                    target_id="prototype",
                    category="progression",
                    estimated_impact=EstimatedImpact.HIGH,
                )
            )
        if has_prototype:
            recommendations.append(
                AIRecommendation(
                    type=RecommendationType.STAGE,
                    title="Validate with Testing",
                    description="Test your prototypes with real users to validate assumptions",
                    confidence=0.8,
                    rationale="Prototypes are ready for user validation",
                    target_id="test",
                    category="validation",
                    estimated_impact=EstimatedImpact.HIGH,
                )
            )
        return rank(recommendations)


_DIFFICULTY_IMPACT = {
    Difficulty.ADVANCED: EstimatedImpact.HIGH,
    Difficulty.INTERMEDIATE: EstimatedImpact.MEDIUM,
    Difficulty.BEGINNER: EstimatedImpact.LOW,
}


def _framework_recommendation(
    target_id: str,
    title: str,
    description: str,
    confidence: float,
    rationale: str,
    impact: EstimatedImpact,
) -> AIRecommendation:
    return AIRecommendation(
        type=RecommendationType.STAGE,
        title=title,
        description=description,
        confidence=clamp_confidence(confidence),
        rationale=rationale,
        target_id=target_id,
        category="framework",
        estimated_impact=impact,
    )
