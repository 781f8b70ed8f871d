from collections.abc import Iterable

from fastapi import APIRouter, Depends

from frame_promptly.core.application.recommendations import RecommendationEngine, recommend_ai_tools
from frame_promptly.core.domain.recommendation import AIRecommendation
from frame_promptly.infrastructure.entrypoints.api.dependencies import get_engine
from frame_promptly.infrastructure.entrypoints.api.dtos.recommendation_dtos import (
    AIRecommendationDTO,
    AIToolsRequestDTO,
    AIToolSuggestionDTO,
    ArtifactsRequestDTO,
    ContextRequestDTO,
    MethodsRequestDTO,
    NextStageRequestDTO,
    TemplatesRequestDTO,
    ToolsRequestDTO,
)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

_RESPONSE = {"response_model": list[AIRecommendationDTO], "response_model_by_alias": True}


def _to_dtos(recommendations: Iterable[AIRecommendation]) -> list[AIRecommendationDTO]:
    return [AIRecommendationDTO.from_domain(r) for r in recommendations]


@router.post("/frameworks", **_RESPONSE)
def recommend_frameworks(
    request: ContextRequestDTO, engine: RecommendationEngine = Depends(get_engine)
) -> list[AIRecommendationDTO]:
    return _to_dtos(engine.recommend_framework(request.context.to_domain()))


@router.post("/next-stage", **_RESPONSE)
def recommend_next_stage(
    request: NextStageRequestDTO, engine: RecommendationEngine = Depends(get_engine)
) -> list[AIRecommendationDTO]:
    return _to_dtos(engine.recommend_next_stage(request.workflow.to_domain(), request.context.to_domain()))


@router.post("/tools", **_RESPONSE)
def recommend_tools(
    request: ToolsRequestDTO, engine: RecommendationEngine = Depends(get_engine)
) -> list[AIRecommendationDTO]:
    return _to_dtos(
        engine.recommend_tools(request.stage_id, request.framework_type, request.context.to_domain())
    )


@router.post("/templates", **_RESPONSE)
def recommend_templates(
    request: TemplatesRequestDTO, engine: RecommendationEngine = Depends(get_engine)
) -> list[AIRecommendationDTO]:
    return _to_dtos(engine.recommend_prompt_templates(request.tool_id, request.context.to_domain()))


@router.post("/methods", **_RESPONSE)
def recommend_methods(
    request: MethodsRequestDTO, engine: RecommendationEngine = Depends(get_engine)
) -> list[AIRecommendationDTO]:
    return _to_dtos(engine.recommend_prompt_methods(request.template_id, request.context.to_domain()))


@router.post("/artifacts", **_RESPONSE)
def recommend_from_artifacts(
    request: ArtifactsRequestDTO, engine: RecommendationEngine = Depends(get_engine)
) -> list[AIRecommendationDTO]:
    return _to_dtos(engine.recommend_based_on_artifacts([a.to_domain() for a in request.artifacts]))


@router.post("/ai-tools", response_model=list[AIToolSuggestionDTO], response_model_by_alias=True)
def suggest_ai_tools(request: AIToolsRequestDTO) -> list[AIToolSuggestionDTO]:
    suggestions = recommend_ai_tools(request.framework, request.stage, request.ux_tool)
    return [AIToolSuggestionDTO.from_domain(s) for s in suggestions]
