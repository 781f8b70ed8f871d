from frame_promptly.core.domain.catalog.framework_type import Difficulty, FrameworkType
from frame_promptly.core.domain.catalog.ux_framework import (
    FrameworkCatalog,
    FrameworkStage,
    UXFramework,
    UXTool,
)

__all__ = [
    "Difficulty",
    "FrameworkCatalog",
    "FrameworkStage",
    "FrameworkType",
    "UXFramework",
    "UXTool",
]
