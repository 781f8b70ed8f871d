from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from frame_promptly.core.domain.prompt import (
    PromptingMethod,
    PromptTemplate,
    PromptVariable,
    VariableType,
    VariableValidation,
)
from frame_promptly.infrastructure.entrypoints.api.dtos.base_dto import CamelModel


class VariableValidationDTO(CamelModel):
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None


class PromptVariableDTO(CamelModel):
    id: str
    name: str = ""
    type: VariableType = VariableType.TEXT
    required: bool = False
    description: str = ""
    default_value: Any = None
    options: list[str] = Field(default_factory=list)
    validation: VariableValidationDTO | None = None

    def to_domain(self) -> PromptVariable:
        validation = None
        if self.validation is not None:
            validation = VariableValidation(
                min_length=self.validation.min_length,
                max_length=self.validation.max_length,
                pattern=self.validation.pattern,
            )
        return PromptVariable(
            id=self.id,
            name=self.name,
            type=self.type,
            required=self.required,
            description=self.description,
            default_value=self.default_value,
            options=tuple(self.options),
            validation=validation,
        )

    @classmethod
    def from_domain(cls, variable: PromptVariable) -> PromptVariableDTO:
        validation = None
        if variable.validation is not None:
            validation = VariableValidationDTO(
                min_length=variable.validation.min_length,
                max_length=variable.validation.max_length,
                pattern=variable.validation.pattern,
            )
        return cls(
            id=variable.id,
            name=variable.name,
            type=variable.type,
            required=variable.required,
            description=variable.description,
            default_value=variable.default_value,
            options=list(variable.options),
            validation=validation,
        )


class PromptTemplateDTO(CamelModel):
    id: str
    name: str
    template: str
    # Kept as a string so an unknown method surfaces as a domain error, not a schema error
    method: str = PromptingMethod.INSTRUCTION_TUNING.value
    description: str = ""
    category: str = "General"
    tags: list[str] = Field(default_factory=list)
    variables: list[PromptVariableDTO] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)

    def to_domain(self) -> PromptTemplate:
        return PromptTemplate(
            id=self.id,
            name=self.name,
            template_body=self.template,
            method=PromptingMethod.parse(self.method),
            description=self.description,
            category=self.category,
            tags=tuple(self.tags),
            variables=tuple(v.to_domain() for v in self.variables),
            examples=tuple(self.examples),
        )

    @classmethod
    def from_domain(cls, template: PromptTemplate) -> PromptTemplateDTO:
        return cls(
            id=template.id,
            name=template.name,
            template=template.template_body,
            method=template.method.value,
            description=template.description,
            category=template.category,
            tags=list(template.tags),
            variables=[PromptVariableDTO.from_domain(v) for v in template.variables],
            examples=list(template.examples),
        )


class TemplateReferenceDTO(CamelModel):
    """Either an inline template or the id of a built-in one."""

    template: PromptTemplateDTO | None = None
    template_id: str | None = None

    @model_validator(mode="after")
    def validate_template_source(self) -> TemplateReferenceDTO:
        if self.template is None and not self.template_id:
            raise ValueError("Either 'template' or 'templateId' is required")
        return self


class BuildPromptRequestDTO(TemplateReferenceDTO):
    method: str
    variables: dict[str, Any] = Field(default_factory=dict)
    context: str = ""
    framework_type: str | None = None
    examples: list[str] = Field(default_factory=list)
    temperature: float = 0.7
    max_tokens: int = 2000


class BuildPromptResponseDTO(CamelModel):
    prompt: str
    method: PromptingMethod
    template_id: str


class ValidatePromptRequestDTO(TemplateReferenceDTO):
    variables: dict[str, Any] = Field(default_factory=dict)


class ValidationResponseDTO(CamelModel):
    valid: bool
    errors: list[str]


class DetectVariablesRequestDTO(CamelModel):
    template: str
    values: dict[str, Any] | None = None


class DetectVariablesResponseDTO(CamelModel):
    variables: list[PromptVariableDTO]
    preview: str | None = None


class EnhancePromptRequestDTO(CamelModel):
    prompt: str
    framework: str = ""
    framework_stage: str = ""
    tool: str = ""
    ai_tool: str = ""
    ai_model: str = ""
    project_context: str = ""
    document_content: str = ""


class EnhancePromptResponseDTO(CamelModel):
    enhanced_prompt: str | None = None
    ai_response: str | None = None


class SavePromptRequestDTO(CamelModel):
    title: str
    content: str
    method: str | None = None
    framework_type: str | None = None
    template_id: str | None = None
