from abc import ABC, abstractmethod
from typing import Any


class FunctionInvokerPort(ABC):
    """Hosted serverless functions reachable by name."""

    @abstractmethod
    async def invoke(self, function_name: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON payload and return the decoded JSON body."""

    @abstractmethod
    async def upload(
        self, function_name: str, filename: str, content: bytes, content_type: str
    ) -> dict[str, Any]:
        """POST a single file as multipart form data under the ``file`` field."""
