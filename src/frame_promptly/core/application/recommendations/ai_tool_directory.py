"""Static directory of AI assistants suited to each framework stage."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class AIToolSuggestion:
    name: str
    description: str
    best_for: tuple[str, ...]


def _tool(name: str, description: str, *best_for: str) -> AIToolSuggestion:
    return AIToolSuggestion(name=name, description=description, best_for=best_for)


DEFAULT_AI_TOOLS: tuple[AIToolSuggestion, ...] = (
    _tool("ChatGPT", "General purpose AI assistant for various UX tasks",
          "General Assistance", "Content Generation"),
    _tool("Miro AI", "For visual collaboration and whiteboarding",
          "Visual Collaboration", "Workshops"),
    _tool("Figma AI", "For design and prototyping assistance", "UI/UX Design", "Prototyping"),
    _tool("Notion AI", "For documentation and knowledge management",
          "Documentation", "Knowledge Management"),
)

AI_TOOLS_BY_STAGE: MappingProxyType[str, MappingProxyType[str, tuple[AIToolSuggestion, ...]]] = (
    MappingProxyType(
        {
            "design-thinking": MappingProxyType(
                {
                    "empathize": (
                        _tool("Miro AI", "For collaborative empathy mapping and user research synthesis",
                              "Empathy Maps", "User Interviews", "Personas"),
                        _tool("Dovetail", "For qualitative research analysis and insights generation",
                              "User Research", "Contextual Inquiry"),
                        _tool("Notion AI", "For organizing research notes and generating insights",
                              "Research Synthesis", "Personas"),
                        _tool("ChatGPT", "For analyzing research data and generating insights",
                              "Research Analysis", "Persona Creation"),
                    ),
                    "define": (
                        _tool("Miro AI", "For affinity diagramming and problem definition",
                              "Affinity Mapping", "Problem Definition"),
                        _tool("Figma Jam", "For collaborative problem space mapping",
                              "Problem Framing", "HMW Questions"),
                        _tool("Mural AI", "For visualizing problem spaces and opportunity areas",
                              "Problem Space Mapping"),
                        _tool("ChatGPT", "For refining problem statements and HMW questions",
                              "Problem Statement Refinement"),
                    ),
                    "ideate": (
                        _tool("Miro AI", "For virtual brainstorming and idea organization",
                              "Brainstorming", "Idea Organization"),
                        _tool("Figma Jam", "For collaborative sketching and concept development",
                              "Sketching", "Concept Development"),
                        _tool("Whimsical", "For creating user flows and information architecture",
                              "User Flows", "IA"),
                        _tool("ChatGPT", "For generating and expanding on ideas",
                              "Idea Generation", "Concept Expansion"),
                    ),
                    "prototype": (
                        _tool("Figma AI", "For generating UI components and layouts",
                              "UI Design", "Prototyping"),
                        _tool("Adobe Firefly", "For generating visual assets and illustrations",
                              "Visual Design", "Assets"),
                        _tool("Galileo AI", "For generating UI from text descriptions",
                              "Rapid Prototyping"),
                        _tool("ChatGPT", "For generating copy and micro-interactions",
                              "Content Writing", "Microcopy"),
                    ),
                    "test": (
                        _tool("UserTesting AI", "For automated user testing and analysis",
                              "Usability Testing"),
                        _tool("Hotjar", "For heatmaps and session recordings", "Behavior Analysis"),
                        _tool("Dovetail", "For analyzing user feedback and test results",
                              "Feedback Analysis"),
                        _tool("ChatGPT", "For analyzing test results and generating insights",
                              "Insight Generation"),
                    ),
                }
            ),
            "lean-ux": MappingProxyType(
                {
                    "think": (
                        _tool("Miro AI", "For lean canvas and assumption mapping", "Assumption Mapping"),
                        _tool("Notion AI", "For documenting hypotheses and experiments",
                              "Hypothesis Documentation"),
                        _tool("Trello", "For managing lean experiments", "Experiment Tracking"),
                        _tool("ChatGPT", "For refining hypotheses and experiment design",
                              "Hypothesis Refinement"),
                    ),
                    "make": (
                        _tool("Figma AI", "For rapid prototyping", "Prototyping"),
                        _tool("Webflow", "For no-code prototyping", "Interactive Prototypes"),
                        _tool("Bubble", "For building functional MVPs", "MVP Development"),
                        _tool("ChatGPT", "For generating content and copy", "Content Generation"),
                    ),
                    "check": (
                        _tool("Google Analytics", "For quantitative metrics", "Analytics"),
                        _tool("Hotjar", "For qualitative user feedback", "User Feedback"),
                        _tool("Amplitude", "For product analytics", "Product Analytics"),
                        _tool("ChatGPT", "For analyzing results and generating insights",
                              "Data Analysis"),
                    ),
                }
            ),
        }
    )
)


def recommend_ai_tools(framework: str, stage: str, ux_tool: str) -> list[AIToolSuggestion]:
    """
    AI assistants for a framework stage, narrowed to those whose ``best_for``
    keywords appear in the UX tool name. Falls back to the whole stage list,
    then to the generic defaults.
    """
    stage_tools = AI_TOOLS_BY_STAGE.get(framework, MappingProxyType({})).get(stage)
    if not stage_tools:
        return list(DEFAULT_AI_TOOLS)

    needle = (ux_tool or "").lower()
    matching = [
        tool for tool in stage_tools if any(keyword.lower() in needle for keyword in tool.best_for)
    ]
    return matching or list(stage_tools)
