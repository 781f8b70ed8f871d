from frame_promptly.core.application.context.workflow_context_manager import (
    WorkflowContextManager,
)

__all__ = ["WorkflowContextManager"]
