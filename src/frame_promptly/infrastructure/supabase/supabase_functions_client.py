from __future__ import annotations

from typing import Any

import httpx

from frame_promptly.core.application.ports import FunctionInvokerPort
from frame_promptly.core.exceptions import FunctionInvocationError
from frame_promptly.infrastructure.common.retry import RetryPolicy
from frame_promptly.infrastructure.configuration import Settings
from frame_promptly.infrastructure.observability import get_logger
from frame_promptly.infrastructure.supabase.supabase_http import auth_headers, decode_json, is_retryable_status

logger = get_logger("supabase_functions")


class SupabaseFunctionsClient(FunctionInvokerPort):
    """Invokes edge functions at ``{supabase_url}/functions/v1/{name}``."""

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        retry: RetryPolicy | None = None,
    ):
        self.base_url = f"{settings.supabase_url.rstrip('/')}/functions/v1"
        self.headers = auth_headers(settings)
        self.timeout = settings.functions_timeout_seconds
        self.client = client
        self.retry = retry or RetryPolicy(max_attempts=settings.functions_max_attempts)

    async def invoke(self, function_name: str, payload: dict[str, Any]) -> dict[str, Any]:
        logger.info("Invoking function", function=function_name)
        return await self.retry.run(lambda: self._post(function_name, json=payload))

    async def upload(
        self, function_name: str, filename: str, content: bytes, content_type: str
    ) -> dict[str, Any]:
        logger.info("Uploading file to function", function=function_name, filename=filename, size=len(content))
        files = {"file": (filename, content, content_type)}
        return await self.retry.run(lambda: self._post(function_name, files=files))

    async def _post(self, function_name: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.base_url}/{function_name}"
        try:
            if self.client is not None:
                response = await self.client.post(url, headers=self.headers, timeout=self.timeout, **kwargs)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(url, headers=self.headers, timeout=self.timeout, **kwargs)
        except httpx.TransportError as e:
            logger.warning(
                "Function transport failure",
                function=function_name,
                error_type=type(e).__name__,
                error_details=str(e),
                error_retryable=True,
            )
            raise FunctionInvocationError(f"{function_name}: {e}", retryable=True) from e

        if response.is_error:
            retryable = is_retryable_status(response.status_code)
            logger.warning(
                "Function answered with HTTP error",
                function=function_name,
                error_type="HTTPStatusError",
                error_details=response.text[:500],
                error_retryable=retryable,
            )
            raise FunctionInvocationError(
                f"{function_name}: {response.text[:200]}",
                retryable=retryable,
                status_code=response.status_code,
            )

        body = decode_json(response, FunctionInvocationError, function_name)
        if not isinstance(body, dict):
            raise FunctionInvocationError(f"{function_name}: expected a JSON object response")
        return body
