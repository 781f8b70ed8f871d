"""Placeholder scanning for prompt templates.

All call sites share one syntax: a single-brace ``{name}`` token, with
optional whitespace inside the braces.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from frame_promptly.core.domain.prompt import PromptTemplate, PromptVariable, VariableType

PLACEHOLDER_PATTERN = re.compile(r"\{\s*([^{}]+?)\s*\}")
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def extract_variables(text: str) -> list[str]:
    """Return distinct placeholder names in first-seen order."""
    if not text:
        return []
    names = (match.group(1).strip() for match in PLACEHOLDER_PATTERN.finditer(text))
    return list(dict.fromkeys(name for name in names if name))


def humanize_variable_name(variable_id: str) -> str:
    """``userGroup`` -> ``User Group``."""
    if not variable_id:
        return variable_id
    spaced = re.sub(r"([A-Z])", r" \1", variable_id[1:])
    return f"{variable_id[0].upper()}{spaced}"


def detect_variables(template_body: str) -> tuple[PromptVariable, ...]:
    """
    Auto-detect required text variables from a free-text template body.
    Only identifier-like names become variables; anything else cannot be
    declared as a variable id.
    """
    return tuple(
        PromptVariable(
            id=name,
            name=humanize_variable_name(name),
            type=VariableType.TEXT,
            required=True,
            description=f"Variable: {name}",
        )
        for name in extract_variables(template_body)
        if IDENTIFIER_PATTERN.match(name)
    )


def merge_detected_variables(template: PromptTemplate) -> PromptTemplate:
    """Append detected variables that the template does not already declare."""
    declared = {v.id for v in template.variables}
    detected = [v for v in detect_variables(template.template_body) if v.id not in declared]
    if not detected:
        return template
    return replace(template, variables=(*template.variables, *detected))


def render_preview(template_body: str, values: Mapping[str, Any]) -> str:
    """Live preview: fill known placeholders, leave unknown ones untouched."""
    result = template_body
    for name, value in values.items():
        pattern = re.compile(r"\{\s*" + re.escape(name) + r"\s*\}")
        text = "" if value is None else str(value)
        result = pattern.sub(lambda _match: text, result)
    return result


def stringify_value(value: Any) -> str:
    """Text a variable value contributes to a prompt; sequences are comma-joined."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(str(item) for item in value)
    return str(value)
