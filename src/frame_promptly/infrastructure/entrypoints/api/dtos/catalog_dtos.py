from __future__ import annotations

from frame_promptly.core.domain.catalog import Difficulty, FrameworkStage, UXFramework, UXTool
from frame_promptly.infrastructure.entrypoints.api.dtos.base_dto import CamelModel


class UXToolDTO(CamelModel):
    id: str
    name: str
    description: str
    category: str
    difficulty: Difficulty
    estimated_time: str
    artifacts: list[str]

    @classmethod
    def from_domain(cls, tool: UXTool) -> UXToolDTO:
        return cls(
            id=tool.id,
            name=tool.name,
            description=tool.description,
            category=tool.category,
            difficulty=tool.difficulty,
            estimated_time=tool.estimated_time,
            artifacts=list(tool.artifacts),
        )


class FrameworkStageDTO(CamelModel):
    id: str
    name: str
    order: int
    description: str
    purpose: str
    recommended_duration: str
    input_requirements: list[str]
    expected_outputs: list[str]
    tools: list[UXToolDTO]

    @classmethod
    def from_domain(cls, stage: FrameworkStage) -> FrameworkStageDTO:
        return cls(
            id=stage.id,
            name=stage.name,
            order=stage.order,
            description=stage.description,
            purpose=stage.purpose,
            recommended_duration=stage.recommended_duration,
            input_requirements=list(stage.input_requirements),
            expected_outputs=list(stage.expected_outputs),
            tools=[UXToolDTO.from_domain(t) for t in stage.tools],
        )


class UXFrameworkDTO(CamelModel):
    id: str
    name: str
    description: str
    category: str
    stages: list[FrameworkStageDTO]
    total_duration: str
    best_use_cases: list[str]
    complexity: Difficulty

    @classmethod
    def from_domain(cls, framework: UXFramework) -> UXFrameworkDTO:
        return cls(
            id=framework.id,
            name=framework.name,
            description=framework.description,
            category=framework.category,
            stages=[FrameworkStageDTO.from_domain(s) for s in framework.ordered_stages()],
            total_duration=framework.total_duration,
            best_use_cases=list(framework.best_use_cases),
            complexity=framework.complexity,
        )
