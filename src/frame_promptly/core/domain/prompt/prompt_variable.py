from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class VariableType(StrEnum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SELECT = "select"
    MULTISELECT = "multiselect"
    CONTEXT = "context"


@dataclass(frozen=True)
class VariableValidation:
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None


@dataclass(frozen=True)
class PromptVariable:
    """A named, typed slot whose value is substituted into a ``{id}`` placeholder."""

    id: str
    name: str = ""
    type: VariableType = VariableType.TEXT
    required: bool = False
    description: str = ""
    default_value: Any = None
    options: tuple[str, ...] = field(default_factory=tuple)
    validation: VariableValidation | None = None

    @property
    def label(self) -> str:
        return self.name or self.id
