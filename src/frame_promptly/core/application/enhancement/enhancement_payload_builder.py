from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ENHANCE_PROMPT_FUNCTION = "generate-enhanced-prompt"
AI_RESPONSE_FUNCTION = "generate-ai-response"
PROCESS_DOCUMENT_FUNCTION = "process-document"


@dataclass(frozen=True)
class WizardSelection:
    """What the user picked across the wizard steps."""

    framework: str = ""
    framework_stage: str = ""
    tool: str = ""
    ai_tool: str = ""
    ai_model: str = ""
    project_context: str = ""


class EnhancementPayloadBuilder:
    @staticmethod
    def enhanced_prompt_payload(prompt: str, selection: WizardSelection) -> dict[str, Any]:
        return {
            "prompt": prompt,
            "aiTool": selection.ai_tool,
            "tool": selection.tool,
            "framework": selection.framework,
            "frameworkStage": selection.framework_stage,
        }

    @staticmethod
    def ai_response_payload(prompt: str, selection: WizardSelection) -> dict[str, Any]:
        return {
            "prompt": prompt,
            "projectContext": selection.project_context,
            "selectedFramework": selection.framework,
            "frameworkStage": selection.framework_stage,
            "selectedTool": selection.tool,
            "aiModel": selection.ai_model,
            "aiTool": selection.ai_tool,
        }

    @staticmethod
    def with_document(prompt: str, document_content: str) -> str:
        """Append extracted document text as a ``Document Content`` section."""
        if not document_content or not document_content.strip():
            return prompt
        return f"{prompt}\n\nDocument Content:\n{document_content.strip()}"
