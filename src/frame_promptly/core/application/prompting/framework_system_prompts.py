from __future__ import annotations

from types import MappingProxyType

from frame_promptly.core.domain.catalog import FrameworkType

FRAMEWORK_SYSTEM_PROMPTS: MappingProxyType[FrameworkType, str] = MappingProxyType(
    {
        FrameworkType.DESIGN_THINKING: (
            "You are a Design Thinking expert focused on human-centered innovation."
        ),
        FrameworkType.DOUBLE_DIAMOND: (
            "You are a Double Diamond process expert specializing in design strategy."
        ),
        FrameworkType.GOOGLE_DESIGN_SPRINT: (
            "You are a Google Design Sprint facilitator with expertise in rapid prototyping."
        ),
        FrameworkType.HUMAN_CENTERED_DESIGN: (
            "You are a Human-Centered Design expert focused on inclusive and accessible solutions."
        ),
        FrameworkType.JOBS_TO_BE_DONE: (
            "You are a Jobs-to-Be-Done expert specializing in customer outcome analysis."
        ),
        FrameworkType.LEAN_UX: (
            "You are a Lean UX expert focused on rapid experimentation and learning."
        ),
        FrameworkType.AGILE_UX: (
            "You are an Agile UX expert specializing in iterative design within development cycles."
        ),
        FrameworkType.HEART: "You are a UX metrics expert specializing in the HEART framework.",
        FrameworkType.HOOKED_MODEL: (
            "You are a behavioral design expert specializing in habit-forming products."
        ),
    }
)


def framework_system_prompt(framework_type: str | None) -> str | None:
    if not framework_type:
        return None
    return FRAMEWORK_SYSTEM_PROMPTS.get(framework_type)
