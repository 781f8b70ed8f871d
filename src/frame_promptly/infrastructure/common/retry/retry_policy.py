from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential_jitter

from frame_promptly.core.exceptions import InfraError

_T = TypeVar("_T")


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, InfraError) and exc.retryable


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    max_attempts: int = 3
    initial_wait: float = 0.25
    max_wait: float = 5.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        """Await ``fn()`` until it succeeds or a non-retryable / final error is raised.

        ``fn`` may be any zero-argument callable returning an awaitable (a lambda
        wrapping a coroutine call included); the awaiting happens inside each attempt.
        """
        async for attempt in self._retrying():
            with attempt:
                return await fn()
        raise RuntimeError("retry loop exited without an attempt")

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(initial=self.initial_wait, max=self.max_wait),
            reraise=True,
        )
