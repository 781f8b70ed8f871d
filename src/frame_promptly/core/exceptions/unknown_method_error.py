from __future__ import annotations

from frame_promptly.core.exceptions.domain_error import DomainError


class UnknownMethodError(DomainError):
    """Raised when a prompting method id is not one of the supported methods."""

    def __init__(self, method: str, supported: list[str]):
        self.method = method
        self.supported = supported
        super().__init__(
            f"Unknown prompting method '{method}'. Expected one of: {', '.join(supported)}"
        )
