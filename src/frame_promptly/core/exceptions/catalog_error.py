from frame_promptly.core.exceptions.domain_error import DomainError


class CatalogError(DomainError):
    """Raised when the framework catalog cannot be loaded or fails validation."""
