import re
from collections.abc import Mapping
from typing import Any

from frame_promptly.core.application.prompting.variable_extractor import stringify_value
from frame_promptly.core.domain.prompt import PromptTemplate, PromptVariable, ValidationResult


class PromptVariableValidator:
    """Checks variable values against the template's declarations.

    Failures are returned as data; this never raises.
    """

    def validate_prompt_variables(
        self, template: PromptTemplate, variables: Mapping[str, Any]
    ) -> ValidationResult:
        errors: list[str] = []
        for variable in template.variables:
            value = variables.get(variable.id)

            if variable.required and _is_missing(value):
                errors.append(f"{variable.label} is required")
                continue

            if _is_present(value) and variable.validation is not None:
                errors.extend(self._check_rules(variable, stringify_value(value)))

        return ValidationResult(errors=tuple(errors))

    @staticmethod
    def _check_rules(variable: PromptVariable, text: str) -> list[str]:
        rules = variable.validation
        errors: list[str] = []
        if rules.min_length and len(text) < rules.min_length:
            errors.append(f"{variable.label} must be at least {rules.min_length} characters")
        if rules.max_length and len(text) > rules.max_length:
            errors.append(f"{variable.label} must be no more than {rules.max_length} characters")
        if rules.pattern:
            try:
                matched = re.search(rules.pattern, text) is not None
            except re.error:
                errors.append(f"{variable.label} has an invalid validation pattern")
            else:
                if not matched:
                    errors.append(f"{variable.label} format is invalid")
        return errors


def _is_missing(value: Any) -> bool:
    return stringify_value(value).strip() == ""


def _is_present(value: Any) -> bool:
    return stringify_value(value) != ""
