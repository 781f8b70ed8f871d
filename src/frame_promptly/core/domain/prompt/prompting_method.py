from __future__ import annotations

from enum import StrEnum

from frame_promptly.core.exceptions.unknown_method_error import UnknownMethodError


class PromptingMethod(StrEnum):
    ZERO_SHOT = "zero-shot"
    FEW_SHOT = "few-shot"
    CHAIN_OF_THOUGHT = "chain-of-thought"
    INSTRUCTION_TUNING = "instruction-tuning"
    ROLE_PLAYING = "role-playing"
    STEP_BY_STEP = "step-by-step"

    @classmethod
    def parse(cls, value: str | PromptingMethod) -> PromptingMethod:
        """Coerce a raw method id, raising UnknownMethodError for anything outside the enum."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownMethodError(str(value), [m.value for m in cls]) from None

    @property
    def display_name(self) -> str:
        return " ".join(part.capitalize() for part in self.value.split("-"))
