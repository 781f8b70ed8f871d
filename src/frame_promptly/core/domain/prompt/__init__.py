from frame_promptly.core.domain.prompt.prompt_template import PromptTemplate
from frame_promptly.core.domain.prompt.prompt_variable import (
    PromptVariable,
    VariableType,
    VariableValidation,
)
from frame_promptly.core.domain.prompt.prompting_method import PromptingMethod
from frame_promptly.core.domain.prompt.validation_result import ValidationResult

__all__ = [
    "PromptTemplate",
    "PromptVariable",
    "PromptingMethod",
    "ValidationResult",
    "VariableType",
    "VariableValidation",
]
