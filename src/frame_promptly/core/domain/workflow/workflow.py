from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WorkflowStage:
    id: str
    framework_stage_id: str
    order: int
    is_completed: bool = False
    is_skipped: bool = False


@dataclass(frozen=True)
class Workflow:
    id: str
    name: str
    framework_type: str
    stages: tuple[WorkflowStage, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def completed_stage_ids(self) -> frozenset[str]:
        return frozenset(s.framework_stage_id for s in self.stages if s.is_completed)
