from fastapi import APIRouter, Depends, HTTPException, status

from frame_promptly.core.domain.catalog import FrameworkCatalog
from frame_promptly.infrastructure.entrypoints.api.dependencies import get_catalog
from frame_promptly.infrastructure.entrypoints.api.dtos.catalog_dtos import UXFrameworkDTO, UXToolDTO

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/frameworks", response_model=list[UXFrameworkDTO], response_model_by_alias=True)
def list_frameworks(catalog: FrameworkCatalog = Depends(get_catalog)) -> list[UXFrameworkDTO]:
    return [UXFrameworkDTO.from_domain(f) for f in catalog.frameworks]


@router.get("/frameworks/{framework_id}", response_model=UXFrameworkDTO, response_model_by_alias=True)
def get_framework(framework_id: str, catalog: FrameworkCatalog = Depends(get_catalog)) -> UXFrameworkDTO:
    framework = catalog.get_framework(framework_id)
    if framework is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Framework {framework_id} not found")
    return UXFrameworkDTO.from_domain(framework)


@router.get("/tools", response_model=list[UXToolDTO], response_model_by_alias=True)
def search_tools(q: str, catalog: FrameworkCatalog = Depends(get_catalog)) -> list[UXToolDTO]:
    return [UXToolDTO.from_domain(t) for t in catalog.search_tools(q)]


@router.get(
    "/frameworks/{framework_id}/stages/{stage_id}/tools/{tool_id}",
    response_model=UXToolDTO,
    response_model_by_alias=True,
)
def get_tool(
    framework_id: str, stage_id: str, tool_id: str, catalog: FrameworkCatalog = Depends(get_catalog)
) -> UXToolDTO:
    tool = catalog.get_tool(framework_id, stage_id, tool_id)
    if tool is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool {tool_id} not found in {framework_id}/{stage_id}",
        )
    return UXToolDTO.from_domain(tool)
