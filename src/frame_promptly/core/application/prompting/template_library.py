from __future__ import annotations

from frame_promptly.core.domain.prompt import (
    PromptingMethod,
    PromptTemplate,
    PromptVariable,
    VariableType,
)
from frame_promptly.core.exceptions import TemplateNotFoundError

BUILT_IN_TEMPLATES: tuple[PromptTemplate, ...] = (
    PromptTemplate(
        id="user-interview-guide",
        name="User Interview Guide",
        description="Generate structured interview questions for user research",
        template_body=(
            "Create a comprehensive user interview guide for {projectType} targeting "
            "{userGroup}. Include warm-up, main, and wrap-up questions."
        ),
        method=PromptingMethod.INSTRUCTION_TUNING,
        category="Research",
        tags=("interviews", "research", "user-insights"),
        variables=(
            PromptVariable(
                id="projectType",
                name="Project Type",
                required=True,
                description="Type of project or product being researched",
            ),
            PromptVariable(
                id="userGroup",
                name="Target User Group",
                required=True,
                description="Primary user group to interview",
            ),
            PromptVariable(
                id="researchGoals",
                name="Research Goals",
                type=VariableType.TEXTAREA,
                description="Specific goals for the research",
            ),
        ),
    ),
    PromptTemplate(
        id="persona-generator",
        name="User Persona Generator",
        description="Create detailed user personas based on research data",
        template_body=(
            "Generate a detailed user persona for {userType} based on the following "
            "research insights: {researchData}"
        ),
        method=PromptingMethod.FEW_SHOT,
        category="Synthesis",
        tags=("personas", "user-research", "synthesis"),
        variables=(
            PromptVariable(
                id="userType",
                name="User Type",
                required=True,
                description="Type of user for the persona",
            ),
            PromptVariable(
                id="researchData",
                name="Research Data",
                type=VariableType.TEXTAREA,
                required=True,
                description="Key insights from user research",
            ),
        ),
    ),
    PromptTemplate(
        id="journey-map-creator",
        name="Customer Journey Map",
        description="Create comprehensive customer journey maps",
        template_body=(
            "Create a customer journey map for {scenario} including touchpoints, "
            "emotions, and opportunities"
        ),
        method=PromptingMethod.STEP_BY_STEP,
        category="Mapping",
        tags=("journey-mapping", "touchpoints", "experience"),
        variables=(
            PromptVariable(
                id="scenario",
                name="Scenario",
                required=True,
                description="Customer scenario to map",
            ),
            PromptVariable(
                id="touchpoints",
                name="Known Touchpoints",
                type=VariableType.TEXTAREA,
                description="Existing touchpoints to include",
            ),
        ),
    ),
    PromptTemplate(
        id="usability-test-plan",
        name="Usability Test Plan",
        description="Generate comprehensive usability testing plans",
        template_body=(
            "Create a usability test plan for {product} with {userGroup} focusing on "
            "{testObjectives}"
        ),
        method=PromptingMethod.INSTRUCTION_TUNING,
        category="Testing",
        tags=("usability-testing", "test-plan", "validation"),
        variables=(
            PromptVariable(
                id="product",
                name="Product/Feature",
                required=True,
                description="Product or feature to test",
            ),
            PromptVariable(
                id="userGroup",
                name="Test Participants",
                required=True,
                description="Target user group for testing",
            ),
            PromptVariable(
                id="testObjectives",
                name="Test Objectives",
                type=VariableType.TEXTAREA,
                required=True,
                description="What you want to learn from testing",
            ),
        ),
    ),
    PromptTemplate(
        id="ideation-facilitator",
        name="Ideation Session Guide",
        description="Generate structured ideation session plans",
        template_body=(
            "Create an ideation session plan for {challenge} using {method} with "
            "{participantCount} participants"
        ),
        method=PromptingMethod.CHAIN_OF_THOUGHT,
        category="Ideation",
        tags=("ideation", "brainstorming", "facilitation"),
        variables=(
            PromptVariable(
                id="challenge",
                name="Design Challenge",
                required=True,
                description="The challenge or problem to address",
            ),
            PromptVariable(
                id="method",
                name="Ideation Method",
                type=VariableType.SELECT,
                required=True,
                description="Preferred ideation technique",
                options=("Brainstorming", "SCAMPER", "How Might We", "Crazy 8s", "6-3-5 Method"),
            ),
            PromptVariable(
                id="participantCount",
                name="Number of Participants",
                type=VariableType.NUMBER,
                required=True,
                description="How many people will participate",
            ),
        ),
    ),
)


class TemplateLibrary:
    """Pre-seeded UX prompt templates, optionally extended with user-authored ones."""

    def __init__(self, templates: tuple[PromptTemplate, ...] = BUILT_IN_TEMPLATES):
        self._templates = templates

    def templates(self) -> list[PromptTemplate]:
        return list(self._templates)

    def find(self, template_id: str) -> PromptTemplate | None:
        return next((t for t in self._templates if t.id == template_id), None)

    def get(self, template_id: str) -> PromptTemplate:
        template = self.find(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template
