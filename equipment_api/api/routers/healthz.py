# equipment_api/api/routers/healthz.py
from fastapi import APIRouter, Depends

from equipment_api.api.deps import get_health_service
from equipment_api.schemas.common import ErrorResponse, OkResponse
from equipment_api.services.health import HealthService

router = APIRouter(tags=["health"])


@router.get(
    "/healthz",
    response_model=OkResponse,
    summary="Liveness probe",
    description="Returns 200 without touching the database.",
)
async def healthz():
    return {"ok": True}


@router.get(
    "/readyz",
    response_model=OkResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Readiness probe",
    description="Runs SELECT 1 against the database; 503 when it is unreachable.",
)
async def readyz(svc: HealthService = Depends(get_health_service)):
    return await svc.ok()
