from functools import lru_cache

from fastapi import Depends

from frame_promptly.core.application.enhancement import PromptEnhancementService
from frame_promptly.core.application.ports import FunctionInvokerPort, PersistencePort
from frame_promptly.core.application.prompting import PromptBuilder, PromptVariableValidator, TemplateLibrary
from frame_promptly.core.application.recommendations import RecommendationEngine
from frame_promptly.core.domain.catalog import FrameworkCatalog
from frame_promptly.infrastructure.catalog import load_framework_catalog
from frame_promptly.infrastructure.configuration import Settings
from frame_promptly.infrastructure.documents import PdfDocumentExtractor
from frame_promptly.infrastructure.fakes import InMemoryRepository
from frame_promptly.infrastructure.supabase import SupabaseFunctionsClient, SupabaseRestRepository


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_catalog(settings: Settings = Depends(get_settings)) -> FrameworkCatalog:
    return load_framework_catalog(settings.catalog_path)


@lru_cache
def get_template_library() -> TemplateLibrary:
    return TemplateLibrary()


def get_prompt_builder(library: TemplateLibrary = Depends(get_template_library)) -> PromptBuilder:
    return PromptBuilder(library)


def get_validator() -> PromptVariableValidator:
    return PromptVariableValidator()


def get_engine(
    catalog: FrameworkCatalog = Depends(get_catalog),
    library: TemplateLibrary = Depends(get_template_library),
) -> RecommendationEngine:
    return RecommendationEngine(catalog, library)


def get_function_invoker(settings: Settings = Depends(get_settings)) -> FunctionInvokerPort:
    return SupabaseFunctionsClient(settings)


def get_enhancement_service(
    invoker: FunctionInvokerPort = Depends(get_function_invoker),
) -> PromptEnhancementService:
    return PromptEnhancementService(invoker)


@lru_cache
def _local_repository() -> InMemoryRepository:
    return InMemoryRepository()


def get_repository(settings: Settings = Depends(get_settings)) -> PersistencePort:
    # Without credentials the service runs against a process-local store
    if settings.supabase_anon_key is None:
        return _local_repository()
    return SupabaseRestRepository(settings)


def get_document_extractor() -> PdfDocumentExtractor:
    return PdfDocumentExtractor()
