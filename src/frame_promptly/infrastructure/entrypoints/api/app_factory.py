from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from frame_promptly.core.exceptions import (
    CatalogError,
    DocumentProcessingError,
    FunctionInvocationError,
    PersistenceError,
    TemplateNotFoundError,
    UnknownMethodError,
)
from frame_promptly.infrastructure.configuration import Settings
from frame_promptly.infrastructure.entrypoints.api.catalog_router import router as catalog_router
from frame_promptly.infrastructure.entrypoints.api.dependencies import get_settings
from frame_promptly.infrastructure.entrypoints.api.document_router import router as document_router
from frame_promptly.infrastructure.entrypoints.api.health_router import router as health_router
from frame_promptly.infrastructure.entrypoints.api.prompt_router import router as prompt_router
from frame_promptly.infrastructure.entrypoints.api.recommendation_router import (
    router as recommendation_router,
)
from frame_promptly.infrastructure.observability import configure_logging, get_logger

logger = get_logger("app_factory")

# Domain failures that map straight onto an HTTP status
_ERROR_STATUS: dict[type[Exception], int] = {
    UnknownMethodError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TemplateNotFoundError: status.HTTP_404_NOT_FOUND,
    DocumentProcessingError: status.HTTP_400_BAD_REQUEST,
    FunctionInvocationError: status.HTTP_502_BAD_GATEWAY,
    PersistenceError: status.HTTP_502_BAD_GATEWAY,
    CatalogError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings.log_level, settings.log_format)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        env=settings.env,
        supabase_configured=settings.supabase_anon_key is not None,
        catalog_path=str(settings.catalog_path) if settings.catalog_path else "bundled",
    )

    app = FastAPI(title=settings.app_name)
    app.dependency_overrides[get_settings] = lambda: settings

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.error("Request validation failed", url=str(request.url), errors=errors)
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": errors})

    for error_type, status_code in _ERROR_STATUS.items():
        app.add_exception_handler(error_type, _domain_error_handler(status_code))

    app.include_router(health_router)
    app.include_router(prompt_router, prefix="/api/v1")
    app.include_router(recommendation_router, prefix="/api/v1")
    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(document_router, prefix="/api/v1")

    return app


def _domain_error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.warning(
            "Request failed",
            context_endpoint=request.url.path,
            context_method=request.method,
            error_type=type(exc).__name__,
            error_details=str(exc),
            error_retryable=getattr(exc, "retryable", False),
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handler
