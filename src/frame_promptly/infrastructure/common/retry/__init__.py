from .retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
