from frame_promptly.core.application.prompting.method_template_registry import (
    METHOD_TEMPLATES,
    get_template,
)
from frame_promptly.core.application.prompting.prompt_builder import (
    PromptBuildConfig,
    PromptBuilder,
)
from frame_promptly.core.application.prompting.prompt_variable_validator import (
    PromptVariableValidator,
)
from frame_promptly.core.application.prompting.template_library import (
    BUILT_IN_TEMPLATES,
    TemplateLibrary,
)
from frame_promptly.core.application.prompting.variable_extractor import (
    detect_variables,
    extract_variables,
    merge_detected_variables,
    render_preview,
    stringify_value,
)

__all__ = [
    "BUILT_IN_TEMPLATES",
    "METHOD_TEMPLATES",
    "PromptBuildConfig",
    "PromptBuilder",
    "PromptVariableValidator",
    "TemplateLibrary",
    "detect_variables",
    "extract_variables",
    "get_template",
    "merge_detected_variables",
    "render_preview",
    "stringify_value",
]
