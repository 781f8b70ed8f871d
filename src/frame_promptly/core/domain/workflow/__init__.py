from frame_promptly.core.domain.workflow.context_summary import ContextSummary, SummaryLength
from frame_promptly.core.domain.workflow.stage_artifact import StageArtifact
from frame_promptly.core.domain.workflow.workflow import Workflow, WorkflowStage

__all__ = [
    "ContextSummary",
    "StageArtifact",
    "SummaryLength",
    "Workflow",
    "WorkflowStage",
]
