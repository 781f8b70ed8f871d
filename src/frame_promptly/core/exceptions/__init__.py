from frame_promptly.core.exceptions.catalog_error import CatalogError
from frame_promptly.core.exceptions.domain_error import DomainError
from frame_promptly.core.exceptions.infra_error import (
    DocumentProcessingError,
    FunctionInvocationError,
    InfraError,
    PersistenceError,
)
from frame_promptly.core.exceptions.template_not_found_error import TemplateNotFoundError
from frame_promptly.core.exceptions.unknown_method_error import UnknownMethodError

__all__ = [
    "CatalogError",
    "DocumentProcessingError",
    "DomainError",
    "FunctionInvocationError",
    "InfraError",
    "PersistenceError",
    "TemplateNotFoundError",
    "UnknownMethodError",
]
