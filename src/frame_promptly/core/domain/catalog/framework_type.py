from enum import StrEnum


class FrameworkType(StrEnum):
    DESIGN_THINKING = "design-thinking"
    DOUBLE_DIAMOND = "double-diamond"
    GOOGLE_DESIGN_SPRINT = "google-design-sprint"
    HUMAN_CENTERED_DESIGN = "human-centered-design"
    JOBS_TO_BE_DONE = "jobs-to-be-done"
    LEAN_UX = "lean-ux"
    AGILE_UX = "agile-ux"
    HEART = "heart"
    HOOKED_MODEL = "hooked-model"


class Difficulty(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
