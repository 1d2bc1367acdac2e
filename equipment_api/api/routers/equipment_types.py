from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from equipment_api.api.deps import get_equipment_type_service
from equipment_api.dto import EquipmentTypePageDTO, EquipmentTypeResponse
from equipment_api.dto.mappers import map_page
from equipment_api.schemas.common import ErrorResponse
from equipment_api.services.equipment_types import EquipmentTypeService

router = APIRouter(prefix="/equipment-types", tags=["equipment-types"])


@router.get(
    "",
    response_model=EquipmentTypePageDTO,
    summary="List equipment types",
    description="Catalogue of types and their serial number masks. `q` matches name or mask.",
)
async def list_equipment_types(
    request: Request,
    q: str | None = Query(None, max_length=100, description="Case-insensitive substring"),
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=0, le=100),
    page_token: str | None = Query(None),
    svc: EquipmentTypeService = Depends(get_equipment_type_service),
):
    try:
        result = await svc.list(q=q, page=page, per_page=per_page, page_token=page_token)
    except ValueError:
        raise HTTPException(status_code=422, detail="invalid page_token")
    return map_page(EquipmentTypePageDTO, result, request.url)


@router.get(
    "/{type_id}",
    response_model=EquipmentTypeResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Show equipment type",
)
async def show_equipment_type(
    type_id: int,
    svc: EquipmentTypeService = Depends(get_equipment_type_service),
):
    return EquipmentTypeResponse(data=await svc.show(type_id))
