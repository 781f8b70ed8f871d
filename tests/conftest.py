import pytest

from frame_promptly.core.application.prompting import PromptBuilder, TemplateLibrary
from frame_promptly.core.application.recommendations import RecommendationEngine
from frame_promptly.core.domain.prompt import PromptingMethod, PromptTemplate, PromptVariable, VariableValidation
from frame_promptly.infrastructure.catalog import load_framework_catalog
from frame_promptly.infrastructure.configuration import Settings


@pytest.fixture
def settings():
    return Settings(
        app_name="FramePromptlyTest",
        APP_ENV="test",
        SUPABASE_URL="https://project.supabase.test",
        SUPABASE_ANON_KEY="anon-test-key",
        functions_timeout_seconds=2.0,
        functions_max_attempts=3,
    )


@pytest.fixture
def catalog():
    return load_framework_catalog()


@pytest.fixture
def library():
    return TemplateLibrary()


@pytest.fixture
def builder(library):
    return PromptBuilder(library)


@pytest.fixture
def engine(catalog, library):
    return RecommendationEngine(catalog, library)


@pytest.fixture
def research_template():
    return PromptTemplate(
        id="custom-research",
        name="Custom Research",
        template_body="Ignored",
        method=PromptingMethod.INSTRUCTION_TUNING,
        description="Guide",
        category="Research",
        variables=(
            PromptVariable(id="email", required=True),
            PromptVariable(
                id="goal",
                name="Research Goal",
                validation=VariableValidation(min_length=5, max_length=20, pattern=r"^[A-Za-z ]+$"),
            ),
        ),
    )
