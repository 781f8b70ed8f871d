from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from frame_promptly.core.domain.catalog import (
    Difficulty,
    FrameworkCatalog,
    FrameworkStage,
    FrameworkType,
    UXFramework,
    UXTool,
)


class ToolModel(BaseModel):
    id: str
    name: str
    category: str
    difficulty: Difficulty
    estimated_time: str
    description: str = ""
    artifacts: List[str] = Field(default_factory=list)

    def to_domain(self) -> UXTool:
        return UXTool(
            id=self.id,
            name=self.name,
            category=self.category,
            difficulty=self.difficulty,
            estimated_time=self.estimated_time,
            description=self.description,
            artifacts=tuple(self.artifacts),
        )


class StageModel(BaseModel):
    id: str
    name: str
    order: int = Field(..., ge=1, description="1-based position of the stage inside its framework")
    description: str = ""
    purpose: str = ""
    recommended_duration: str = ""
    input_requirements: List[str] = Field(default_factory=list)
    expected_outputs: List[str] = Field(default_factory=list)
    tools: List[ToolModel] = Field(default_factory=list)

    @field_validator("tools")
    def validate_unique_tools(cls, v: List[ToolModel]) -> List[ToolModel]:
        ids = [t.id for t in v]
        if len(ids) != len(set(ids)):
            raise ValueError("tool ids must be unique within a stage")
        return v

    def to_domain(self) -> FrameworkStage:
        return FrameworkStage(
            id=self.id,
            name=self.name,
            order=self.order,
            description=self.description,
            purpose=self.purpose,
            recommended_duration=self.recommended_duration,
            input_requirements=tuple(self.input_requirements),
            expected_outputs=tuple(self.expected_outputs),
            tools=tuple(t.to_domain() for t in self.tools),
        )


class FrameworkModel(BaseModel):
    id: FrameworkType
    name: str
    description: str = ""
    category: str = "process"
    total_duration: str = ""
    best_use_cases: List[str] = Field(default_factory=list)
    complexity: Difficulty = Difficulty.INTERMEDIATE
    stages: List[StageModel] = Field(default_factory=list)

    @field_validator("stages")
    def validate_stage_order(cls, v: List[StageModel]) -> List[StageModel]:
        orders = [s.order for s in v]
        if any(b <= a for a, b in zip(orders, orders[1:])):
            raise ValueError("stage order must be strictly increasing")
        ids = [s.id for s in v]
        if len(ids) != len(set(ids)):
            raise ValueError("stage ids must be unique within a framework")
        return v

    def to_domain(self) -> UXFramework:
        return UXFramework(
            id=self.id.value,
            name=self.name,
            description=self.description,
            category=self.category,
            stages=tuple(s.to_domain() for s in self.stages),
            total_duration=self.total_duration,
            best_use_cases=tuple(self.best_use_cases),
            complexity=self.complexity,
        )


class CatalogManifestModel(BaseModel):
    frameworks: List[FrameworkModel] = Field(..., description="Every supported framework, keyed by id")

    @model_validator(mode="after")
    def validate_unique_frameworks(self) -> "CatalogManifestModel":
        ids = [f.id for f in self.frameworks]
        if len(ids) != len(set(ids)):
            raise ValueError("framework ids must be unique")
        return self

    def to_domain(self) -> FrameworkCatalog:
        return FrameworkCatalog(frameworks=tuple(f.to_domain() for f in self.frameworks))
