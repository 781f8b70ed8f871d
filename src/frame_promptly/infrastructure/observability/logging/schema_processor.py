"""Structlog processor that nests flat event fields into the service log schema.

All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "frame-promptly"),
        "environment": os.environ.get("APP_ENV", "local"),
        "message": event_dict.pop("event", ""),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {
        "component": component,
        "endpoint": event_dict.pop("context_endpoint", None),
        "method": event_dict.pop("context_method", None),
    }


def schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _build_root_fields(event_dict)

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
