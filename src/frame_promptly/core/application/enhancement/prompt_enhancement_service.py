from __future__ import annotations

import logging
from typing import Any

from frame_promptly.core.application.enhancement.enhancement_payload_builder import (
    AI_RESPONSE_FUNCTION,
    ENHANCE_PROMPT_FUNCTION,
    PROCESS_DOCUMENT_FUNCTION,
    EnhancementPayloadBuilder,
    WizardSelection,
)
from frame_promptly.core.application.ports import FunctionInvokerPort
from frame_promptly.core.exceptions import FunctionInvocationError

logger = logging.getLogger(__name__)


class PromptEnhancementService:
    """Sends built prompts to the hosted functions and unwraps their answers."""

    def __init__(self, invoker: FunctionInvokerPort):
        self.invoker = invoker
        self.payloads = EnhancementPayloadBuilder()

    async def enhance_prompt(self, prompt: str, selection: WizardSelection) -> str:
        payload = self.payloads.enhanced_prompt_payload(prompt, selection)
        body = await self.invoker.invoke(ENHANCE_PROMPT_FUNCTION, payload)
        return self._unwrap(ENHANCE_PROMPT_FUNCTION, body, "enhancedPrompt")

    async def generate_ai_response(self, prompt: str, selection: WizardSelection) -> str:
        payload = self.payloads.ai_response_payload(prompt, selection)
        body = await self.invoker.invoke(AI_RESPONSE_FUNCTION, payload)
        return self._unwrap(AI_RESPONSE_FUNCTION, body, "aiResponse")

    async def extract_document_text(
        self, filename: str, content: bytes, content_type: str = "application/pdf"
    ) -> str:
        body = await self.invoker.upload(PROCESS_DOCUMENT_FUNCTION, filename, content, content_type)
        return self._unwrap(PROCESS_DOCUMENT_FUNCTION, body, "documentContent")

    @staticmethod
    def _unwrap(function_name: str, body: dict[str, Any], key: str) -> str:
        if body.get("error"):
            logger.warning("Function %s answered with an error: %s", function_name, body["error"])
            raise FunctionInvocationError(f"{function_name}: {body['error']}")
        value = body.get(key)
        if not isinstance(value, str):
            raise FunctionInvocationError(f"{function_name}: response is missing '{key}'")
        return value
