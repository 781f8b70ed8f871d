import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from frame_promptly.core.application.prompting.framework_system_prompts import (
    framework_system_prompt,
)
from frame_promptly.core.application.prompting.method_template_registry import get_template
from frame_promptly.core.application.prompting.template_library import TemplateLibrary
from frame_promptly.core.application.prompting.variable_extractor import stringify_value
from frame_promptly.core.domain.prompt import PromptingMethod, PromptTemplate

logger = logging.getLogger(__name__)

_SLOT_PATTERN = re.compile(r"\{([^{}]+)\}")
_BLANK_RUN_PATTERN = re.compile(r"\n\s*\n\s*\n")
_UNRESOLVED_PATTERN = re.compile(r"\{\w+\}")

DEFAULT_ROLE = "UX Designer"
DEFAULT_EXPERTISE = "user experience design"
DEFAULT_STYLE = "analytical and user-focused"


@dataclass(frozen=True)
class PromptBuildConfig:
    method: PromptingMethod | str
    template: PromptTemplate
    variables: Mapping[str, Any] = field(default_factory=dict)
    context: str = ""
    framework_type: str | None = None
    examples: tuple[str, ...] = field(default_factory=tuple)
    # Carried through to the enhancement payload, not used for text assembly.
    temperature: float = 0.7
    max_tokens: int = 2000


class PromptBuilder:
    """Composes the final prompt text from a method skeleton, a template and the wizard context.

    Stateless: every call is a pure function of its config.
    """

    def __init__(self, library: TemplateLibrary | None = None):
        self.library = library or TemplateLibrary()

    def build_prompt(self, config: PromptBuildConfig) -> str:
        method = PromptingMethod.parse(config.method)
        skeleton = get_template(method)
        slots = self._build_slots(config)

        prompt = self._substitute(skeleton, slots)
        prompt = _BLANK_RUN_PATTERN.sub("\n\n", prompt)
        prompt = self._strip_unresolved(prompt)

        logger.debug("Prompt built with method %s for template %s", method, config.template.id)
        return prompt.strip()

    def generate_contextual_prompt(
        self,
        template_id: str,
        variables: Mapping[str, Any],
        context: str,
        method: PromptingMethod | str = PromptingMethod.INSTRUCTION_TUNING,
    ) -> str:
        """Build a prompt from a built-in library template."""
        template = self.library.get(template_id)
        return self.build_prompt(
            PromptBuildConfig(
                method=method,
                template=template,
                variables=variables,
                context=context,
            )
        )

    @staticmethod
    def build_instructions(template: PromptTemplate) -> str:
        instructions = [
            f"Focus on {template.category} best practices",
            "Provide actionable and specific guidance",
            "Include relevant examples where helpful",
            "Structure your response clearly",
        ]
        if template.description:
            instructions.append(template.description)
        return "\n".join(f"- {line}" for line in instructions)

    # ── Helpers ───────────────────────────────────────────────────

    def _build_slots(self, config: PromptBuildConfig) -> dict[str, Any]:
        variables = config.variables
        system_prompt = framework_system_prompt(config.framework_type)
        if system_prompt is None:
            system_prompt = config.template.template_body

        slots: dict[str, Any] = {
            "systemPrompt": system_prompt,
            "task": variables.get("task") or "",
            "context": config.context or "",
            "userInput": variables.get("userInput") or "",
            "examples": "\n\n".join(config.examples),
            "instructions": self.build_instructions(config.template),
            "role": variables.get("role") or DEFAULT_ROLE,
            "expertise": variables.get("expertise") or DEFAULT_EXPERTISE,
            "style": variables.get("style") or DEFAULT_STYLE,
        }
        # Caller-supplied values win over the computed slots.
        slots.update(variables)
        return slots

    @staticmethod
    def _substitute(skeleton: str, slots: Mapping[str, Any]) -> str:
        """Single pass: substituted values are never re-scanned for placeholders."""

        def replace(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in slots:
                return match.group(0)
            return stringify_value(slots[key])

        return _SLOT_PATTERN.sub(replace, skeleton)

    @staticmethod
    def _strip_unresolved(prompt: str) -> str:
        # Removing one token can join braces into a new one, e.g. "{a{b}}".
        while _UNRESOLVED_PATTERN.search(prompt):
            prompt = _UNRESOLVED_PATTERN.sub("", prompt)
        return prompt
