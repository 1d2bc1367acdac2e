"""/equipment routers that delegate to EquipmentService via DI."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from equipment_api.api.deps import get_equipment_service
from equipment_api.dto import (
    BulkCreateResponse,
    EquipmentDTO,
    EquipmentPageDTO,
    EquipmentResponse,
)
from equipment_api.dto.mappers import map_page
from equipment_api.schemas.common import ErrorResponse, ValidationErrorResponse
from equipment_api.schemas.equipment import EquipmentCreateRequest, EquipmentUpdateRequest
from equipment_api.services.equipments import EquipmentService

router = APIRouter(prefix="/equipment", tags=["equipment"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Equipment not found"}}
_INVALID = {422: {"model": ValidationErrorResponse, "description": "validation error"}}

_PER_PAGE = Query(None, ge=0, le=100, description="Items per page (unset or 0 means 30)")
_PAGE = Query(1, ge=1, description="Page number (1-based)")
_PAGE_TOKEN = Query(None, description="Offset token from meta.next_page_token; overrides page")


@router.get(
    "",
    response_model=EquipmentPageDTO,
    responses=_INVALID,
    summary="List equipment",
    description="Active equipment in id order, paginated. Links keep the query string.",
)
async def list_equipment(
    request: Request,
    page: int = _PAGE,
    per_page: int | None = _PER_PAGE,
    page_token: str | None = _PAGE_TOKEN,
    svc: EquipmentService = Depends(get_equipment_service),
):
    try:
        result = await svc.list(page=page, per_page=per_page, page_token=page_token)
    except ValueError:
        raise HTTPException(status_code=422, detail="invalid page_token")
    return map_page(EquipmentPageDTO, result, request.url)


@router.get(
    "/search",
    response_model=EquipmentPageDTO,
    responses=_INVALID,
    summary="Search equipment by serial number",
    description="Substring match on serial_number; paginated like the list endpoint.",
)
async def search_equipment(
    request: Request,
    serial_number: str | None = Query(None, max_length=20, description="Substring to look for"),
    page: int = _PAGE,
    per_page: int | None = _PER_PAGE,
    page_token: str | None = _PAGE_TOKEN,
    svc: EquipmentService = Depends(get_equipment_service),
):
    try:
        result = await svc.search(
            serial_number=serial_number, page=page, per_page=per_page, page_token=page_token
        )
    except ValueError:
        raise HTTPException(status_code=422, detail="invalid page_token")
    return map_page(EquipmentPageDTO, result, request.url)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EquipmentResponse | BulkCreateResponse,
    responses=_INVALID,
    summary="Create equipment (single or bulk)",
    description=(
        "`serial_number` may be a string or a list. With a list every element is "
        "validated on its own and valid elements are stored even when others fail; "
        "the 422 body then lists per-item `results`."
    ),
)
async def create_equipment(
    payload: EquipmentCreateRequest,
    svc: EquipmentService = Depends(get_equipment_service),
):
    created = await svc.create(
        equipment_type_id=payload.equipment_type_id,
        serial_number=payload.serial_number_input(),
        remark=payload.remark,
    )
    if isinstance(created, EquipmentDTO):
        return EquipmentResponse(data=created)
    return created


@router.get(
    "/{equipment_id}",
    response_model=EquipmentResponse,
    responses=_NOT_FOUND,
    summary="Show equipment",
)
async def show_equipment(
    equipment_id: int,
    svc: EquipmentService = Depends(get_equipment_service),
):
    return EquipmentResponse(data=await svc.show(equipment_id))


@router.api_route(
    "/{equipment_id}",
    methods=["PUT", "PATCH"],
    response_model=EquipmentResponse,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Update equipment (partial)",
)
async def update_equipment(
    equipment_id: int,
    payload: EquipmentUpdateRequest,
    svc: EquipmentService = Depends(get_equipment_service),
):
    return EquipmentResponse(data=await svc.update(equipment_id, payload.supplied()))


@router.delete(
    "/{equipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
    summary="Delete equipment (soft delete)",
)
async def delete_equipment(
    equipment_id: int,
    svc: EquipmentService = Depends(get_equipment_service),
):
    await svc.destroy(equipment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
