from __future__ import annotations

from typing import Any

import httpx

from frame_promptly.core.application.ports import Collection, PersistencePort
from frame_promptly.core.exceptions import PersistenceError
from frame_promptly.infrastructure.common.retry import RetryPolicy
from frame_promptly.infrastructure.configuration import Settings
from frame_promptly.infrastructure.observability import get_logger
from frame_promptly.infrastructure.supabase.supabase_http import auth_headers, decode_json, is_retryable_status

logger = get_logger("supabase_rest")

OWNER_COLUMN = "user_id"


class SupabaseRestRepository(PersistencePort):
    """
    Owner-scoped row store over the PostgREST endpoint ``/rest/v1/{collection}``.
    Every query is filtered by ``user_id=eq.<owner>``; writes ask for the stored row back.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        retry: RetryPolicy | None = None,
    ):
        self.base_url = f"{settings.supabase_url.rstrip('/')}/rest/v1"
        self.headers = {
            **auth_headers(settings),
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        self.timeout = settings.functions_timeout_seconds
        self.client = client
        self.retry = retry or RetryPolicy(max_attempts=settings.functions_max_attempts)

    async def insert(self, collection: Collection, owner_id: str, row: dict[str, Any]) -> dict[str, Any]:
        body = {**row, OWNER_COLUMN: owner_id}
        rows = await self._send("POST", collection, json=body)
        if not rows:
            raise PersistenceError(f"Insert into {collection} returned no row")
        return rows[0]

    async def update(
        self, collection: Collection, owner_id: str, row_id: str, changes: dict[str, Any]
    ) -> dict[str, Any] | None:
        # Ownership is not transferable
        changes = {k: v for k, v in changes.items() if k not in ("id", OWNER_COLUMN)}
        rows = await self._send("PATCH", collection, params=self._filters(owner_id, row_id), json=changes)
        return rows[0] if rows else None

    async def select(
        self, collection: Collection, owner_id: str, row_id: str | None = None
    ) -> list[dict[str, Any]]:
        params = {**self._filters(owner_id, row_id), "select": "*"}
        return await self._send("GET", collection, params=params)

    async def delete(self, collection: Collection, owner_id: str, row_id: str) -> bool:
        rows = await self._send("DELETE", collection, params=self._filters(owner_id, row_id))
        return bool(rows)

    @staticmethod
    def _filters(owner_id: str, row_id: str | None) -> dict[str, str]:
        params = {OWNER_COLUMN: f"eq.{owner_id}"}
        if row_id is not None:
            params["id"] = f"eq.{row_id}"
        return params

    async def _send(self, method: str, collection: Collection, **kwargs: Any) -> list[dict[str, Any]]:
        return await self.retry.run(lambda: self._request(method, collection, **kwargs))

    async def _request(self, method: str, collection: Collection, **kwargs: Any) -> list[dict[str, Any]]:
        url = f"{self.base_url}/{collection}"
        try:
            if self.client is not None:
                response = await self.client.request(
                    method, url, headers=self.headers, timeout=self.timeout, **kwargs
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(
                        method, url, headers=self.headers, timeout=self.timeout, **kwargs
                    )
        except httpx.TransportError as e:
            raise PersistenceError(f"{method} {collection}: {e}", retryable=True) from e

        if response.is_error:
            retryable = is_retryable_status(response.status_code)
            logger.warning(
                "Row store request failed",
                collection=str(collection),
                method=method,
                error_type="HTTPStatusError",
                error_details=response.text[:500],
                error_retryable=retryable,
            )
            raise PersistenceError(
                f"{method} {collection}: {response.text[:200]}",
                retryable=retryable,
                status_code=response.status_code,
            )

        body = decode_json(response, PersistenceError, f"{method} {collection}")
        if body is None:
            return []
        return body if isinstance(body, list) else [body]
