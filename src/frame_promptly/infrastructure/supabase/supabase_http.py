from __future__ import annotations

from typing import Any

import httpx

from frame_promptly.core.exceptions import InfraError
from frame_promptly.infrastructure.configuration import Settings


def auth_headers(settings: Settings) -> dict[str, str]:
    key = settings.supabase_anon_key.get_secret_value() if settings.supabase_anon_key else ""
    return {
        "apikey": key,
        "Authorization": f"Bearer {key}",
    }


def is_retryable_status(status_code: int) -> bool:
    return status_code >= 500 or status_code == 429


def decode_json(response: httpx.Response, error: type[InfraError], label: str) -> Any:
    """Body as JSON; an undecodable success body is reported as ``error``."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise error(
            f"{label}: response is not valid JSON ({response.text[:200]})",
            status_code=response.status_code,
        ) from e
