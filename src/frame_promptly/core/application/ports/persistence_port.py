from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any


class Collection(StrEnum):
    PROJECTS = "projects"
    GENERATED_PROMPTS = "generated_prompts"
    CUSTOM_PROMPTS = "custom_prompts"
    PROFILES = "profiles"


class PersistencePort(ABC):
    """Owner-scoped row store keyed by ``id``."""

    @abstractmethod
    async def insert(self, collection: Collection, owner_id: str, row: dict[str, Any]) -> dict[str, Any]:
        pass

    @abstractmethod
    async def update(
        self, collection: Collection, owner_id: str, row_id: str, changes: dict[str, Any]
    ) -> dict[str, Any] | None:
        pass

    @abstractmethod
    async def select(
        self, collection: Collection, owner_id: str, row_id: str | None = None
    ) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def delete(self, collection: Collection, owner_id: str, row_id: str) -> bool:
        pass
