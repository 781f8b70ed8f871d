from __future__ import annotations

from dataclasses import dataclass, field

from frame_promptly.core.domain.catalog.framework_type import Difficulty


@dataclass(frozen=True)
class UXTool:
    id: str
    name: str
    category: str
    difficulty: Difficulty
    estimated_time: str
    description: str = ""
    artifacts: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FrameworkStage:
    id: str
    name: str
    order: int
    description: str = ""
    purpose: str = ""
    recommended_duration: str = ""
    input_requirements: tuple[str, ...] = field(default_factory=tuple)
    expected_outputs: tuple[str, ...] = field(default_factory=tuple)
    tools: tuple[UXTool, ...] = field(default_factory=tuple)

    def tool(self, tool_id: str) -> UXTool | None:
        return next((t for t in self.tools if t.id == tool_id), None)


@dataclass(frozen=True)
class UXFramework:
    id: str
    name: str
    description: str = ""
    category: str = "process"
    stages: tuple[FrameworkStage, ...] = field(default_factory=tuple)
    total_duration: str = ""
    best_use_cases: tuple[str, ...] = field(default_factory=tuple)
    complexity: Difficulty = Difficulty.INTERMEDIATE

    def stage(self, stage_id: str) -> FrameworkStage | None:
        return next((s for s in self.stages if s.id == stage_id), None)

    def ordered_stages(self) -> tuple[FrameworkStage, ...]:
        return tuple(sorted(self.stages, key=lambda s: s.order))


@dataclass(frozen=True)
class FrameworkCatalog:
    """Read-only reference data: every supported framework with its stages and tools."""

    frameworks: tuple[UXFramework, ...] = field(default_factory=tuple)

    def framework_ids(self) -> list[str]:
        return [f.id for f in self.frameworks]

    def get_framework(self, framework_id: str | None) -> UXFramework | None:
        if not framework_id:
            return None
        return next((f for f in self.frameworks if f.id == framework_id), None)

    def get_stage(self, framework_id: str | None, stage_id: str) -> FrameworkStage | None:
        framework = self.get_framework(framework_id)
        return framework.stage(stage_id) if framework else None

    def get_tool(self, framework_id: str | None, stage_id: str, tool_id: str) -> UXTool | None:
        stage = self.get_stage(framework_id, stage_id)
        return stage.tool(tool_id) if stage else None

    def search_tools(self, query: str) -> list[UXTool]:
        """Case-insensitive match on tool name, description or category, deduplicated by id."""
        needle = query.strip().lower()
        if not needle:
            return []
        found: dict[str, UXTool] = {}
        for framework in self.frameworks:
            for stage in framework.stages:
                for tool in stage.tools:
                    haystack = f"{tool.name} {tool.description} {tool.category}".lower()
                    if needle in haystack:
                        found.setdefault(tool.id, tool)
        return list(found.values())
