from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from frame_promptly.core.application.enhancement import EnhancementPayloadBuilder, PromptEnhancementService, WizardSelection
from frame_promptly.core.application.ports import Collection, PersistencePort
from frame_promptly.core.application.prompting import (
    PromptBuildConfig,
    PromptBuilder,
    PromptVariableValidator,
    TemplateLibrary,
    detect_variables,
    render_preview,
)
from frame_promptly.core.domain.prompt import PromptingMethod, PromptTemplate
from frame_promptly.infrastructure.entrypoints.api.dependencies import (
    get_enhancement_service,
    get_prompt_builder,
    get_repository,
    get_template_library,
    get_validator,
)
from frame_promptly.infrastructure.entrypoints.api.dtos.prompt_dtos import (
    BuildPromptRequestDTO,
    BuildPromptResponseDTO,
    DetectVariablesRequestDTO,
    DetectVariablesResponseDTO,
    EnhancePromptRequestDTO,
    EnhancePromptResponseDTO,
    PromptTemplateDTO,
    PromptVariableDTO,
    SavePromptRequestDTO,
    TemplateReferenceDTO,
    ValidatePromptRequestDTO,
    ValidationResponseDTO,
)
from frame_promptly.infrastructure.entrypoints.api.security import require_owner
from frame_promptly.infrastructure.observability import get_logger

logger = get_logger("prompt_router")
router = APIRouter(prefix="/prompts", tags=["prompts"])


def _resolve_template(request: TemplateReferenceDTO, library: TemplateLibrary) -> PromptTemplate:
    if request.template is not None:
        return request.template.to_domain()
    return library.get(request.template_id)


@router.post("/build", response_model=BuildPromptResponseDTO, response_model_by_alias=True)
def build_prompt(
    request: BuildPromptRequestDTO,
    builder: PromptBuilder = Depends(get_prompt_builder),
    library: TemplateLibrary = Depends(get_template_library),
) -> BuildPromptResponseDTO:
    method = PromptingMethod.parse(request.method)
    template = _resolve_template(request, library)
    prompt = builder.build_prompt(
        PromptBuildConfig(
            method=method,
            template=template,
            variables=request.variables,
            context=request.context,
            framework_type=request.framework_type,
            examples=tuple(request.examples),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )
    )
    logger.info("Prompt built", method=str(method), template_id=template.id, length=len(prompt))
    return BuildPromptResponseDTO(prompt=prompt, method=method, template_id=template.id)


@router.post("/validate", response_model=ValidationResponseDTO)
def validate_prompt(
    request: ValidatePromptRequestDTO,
    validator: PromptVariableValidator = Depends(get_validator),
    library: TemplateLibrary = Depends(get_template_library),
) -> ValidationResponseDTO:
    result = validator.validate_prompt_variables(_resolve_template(request, library), request.variables)
    return ValidationResponseDTO(valid=result.valid, errors=list(result.errors))


@router.post("/variables", response_model=DetectVariablesResponseDTO, response_model_by_alias=True)
def detect_template_variables(request: DetectVariablesRequestDTO) -> DetectVariablesResponseDTO:
    variables = [PromptVariableDTO.from_domain(v) for v in detect_variables(request.template)]
    preview = render_preview(request.template, request.values) if request.values is not None else None
    return DetectVariablesResponseDTO(variables=variables, preview=preview)


@router.get("/templates", response_model=list[PromptTemplateDTO], response_model_by_alias=True)
def list_templates(library: TemplateLibrary = Depends(get_template_library)) -> list[PromptTemplateDTO]:
    return [PromptTemplateDTO.from_domain(t) for t in library.templates()]


@router.get("/templates/{template_id}", response_model=PromptTemplateDTO, response_model_by_alias=True)
def get_template(template_id: str, library: TemplateLibrary = Depends(get_template_library)) -> PromptTemplateDTO:
    return PromptTemplateDTO.from_domain(library.get(template_id))


@router.post("/enhance", response_model=EnhancePromptResponseDTO, response_model_by_alias=True)
async def enhance_prompt(
    request: EnhancePromptRequestDTO,
    respond: bool = False,
    service: PromptEnhancementService = Depends(get_enhancement_service),
) -> EnhancePromptResponseDTO:
    """Polishes a built prompt, or with ``respond=true`` asks the model to answer it."""
    selection = WizardSelection(
        framework=request.framework,
        framework_stage=request.framework_stage,
        tool=request.tool,
        ai_tool=request.ai_tool,
        ai_model=request.ai_model,
        project_context=request.project_context,
    )
    prompt = EnhancementPayloadBuilder.with_document(request.prompt, request.document_content)
    if respond:
        return EnhancePromptResponseDTO(ai_response=await service.generate_ai_response(prompt, selection))
    return EnhancePromptResponseDTO(enhanced_prompt=await service.enhance_prompt(prompt, selection))


@router.post("/saved", status_code=status.HTTP_201_CREATED)
async def save_prompt(
    request: SavePromptRequestDTO,
    owner_id: str = Depends(require_owner),
    repository: PersistencePort = Depends(get_repository),
) -> dict[str, Any]:
    if request.method is not None:
        PromptingMethod.parse(request.method)
    return await repository.insert(Collection.GENERATED_PROMPTS, owner_id, request.model_dump())


@router.get("/saved")
async def list_saved_prompts(
    owner_id: str = Depends(require_owner),
    repository: PersistencePort = Depends(get_repository),
) -> list[dict[str, Any]]:
    return await repository.select(Collection.GENERATED_PROMPTS, owner_id)


@router.delete("/saved/{prompt_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_saved_prompt(
    prompt_id: str,
    owner_id: str = Depends(require_owner),
    repository: PersistencePort = Depends(get_repository),
) -> None:
    if not await repository.delete(Collection.GENERATED_PROMPTS, owner_id, prompt_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")
