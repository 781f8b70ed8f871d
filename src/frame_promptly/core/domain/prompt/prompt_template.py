from __future__ import annotations

from dataclasses import dataclass, field

from frame_promptly.core.domain.prompt.prompt_variable import PromptVariable
from frame_promptly.core.domain.prompt.prompting_method import PromptingMethod


@dataclass(frozen=True)
class PromptTemplate:
    id: str
    name: str
    template_body: str
    method: PromptingMethod
    description: str = ""
    category: str = "General"
    tags: tuple[str, ...] = field(default_factory=tuple)
    variables: tuple[PromptVariable, ...] = field(default_factory=tuple)
    examples: tuple[str, ...] = field(default_factory=tuple)

    def variable(self, variable_id: str) -> PromptVariable | None:
        return next((v for v in self.variables if v.id == variable_id), None)
