from frame_promptly.core.application.enhancement.enhancement_payload_builder import (
    EnhancementPayloadBuilder,
    WizardSelection,
)
from frame_promptly.core.application.enhancement.prompt_enhancement_service import (
    PromptEnhancementService,
)

__all__ = ["EnhancementPayloadBuilder", "PromptEnhancementService", "WizardSelection"]
