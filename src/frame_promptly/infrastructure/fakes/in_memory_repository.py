from __future__ import annotations

import copy
import uuid
from collections import defaultdict
from datetime import UTC, datetime
from typing import Any

from frame_promptly.core.application.ports import Collection, PersistencePort


class InMemoryRepository(PersistencePort):
    """Process-local row store with the same owner scoping as the REST repository."""

    def __init__(self) -> None:
        self._rows: dict[Collection, dict[str, dict[str, Any]]] = defaultdict(dict)

    async def insert(self, collection: Collection, owner_id: str, row: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(UTC).isoformat()
        stored = {
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
            **copy.deepcopy(row),
            "user_id": owner_id,
        }
        self._rows[collection][stored["id"]] = stored
        return copy.deepcopy(stored)

    async def update(
        self, collection: Collection, owner_id: str, row_id: str, changes: dict[str, Any]
    ) -> dict[str, Any] | None:
        stored = self._owned(collection, owner_id, row_id)
        if stored is None:
            return None
        stored.update({k: copy.deepcopy(v) for k, v in changes.items() if k not in ("id", "user_id")})
        stored["updated_at"] = datetime.now(UTC).isoformat()
        return copy.deepcopy(stored)

    async def select(
        self, collection: Collection, owner_id: str, row_id: str | None = None
    ) -> list[dict[str, Any]]:
        rows = [
            r
            for r in self._rows[collection].values()
            if r["user_id"] == owner_id and (row_id is None or r["id"] == row_id)
        ]
        return copy.deepcopy(rows)

    async def delete(self, collection: Collection, owner_id: str, row_id: str) -> bool:
        if self._owned(collection, owner_id, row_id) is None:
            return False
        del self._rows[collection][row_id]
        return True

    def _owned(self, collection: Collection, owner_id: str, row_id: str) -> dict[str, Any] | None:
        row = self._rows[collection].get(row_id)
        if row is None or row["user_id"] != owner_id:
            return None
        return row
