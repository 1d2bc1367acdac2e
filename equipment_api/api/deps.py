"""API dependency helpers and service providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from equipment_api import db
from equipment_api.core.config import settings
from equipment_api.db import get_async_session
from equipment_api.infra.unit_of_work import SqlAlchemyUnitOfWork
from equipment_api.services.equipment_types import EquipmentTypeService
from equipment_api.services.equipments import EquipmentService
from equipment_api.services.health import HealthService

__all__ = [
    "get_equipment_service",
    "get_equipment_type_service",
    "get_health_service",
]


def _uow_factory() -> SqlAlchemyUnitOfWork:
    # Looked up at call time so configure_engine() can swap the session factory
    return SqlAlchemyUnitOfWork(db.SessionLocal)


def get_equipment_service() -> EquipmentService:
    return EquipmentService(
        _uow_factory,
        default_per_page=settings.default_per_page,
        max_per_page=settings.max_per_page,
    )


def get_equipment_type_service() -> EquipmentTypeService:
    return EquipmentTypeService(
        _uow_factory,
        default_per_page=settings.default_per_page,
        max_per_page=settings.max_per_page,
    )


def get_health_service(
    session: AsyncSession = Depends(get_async_session),
) -> HealthService:
    return HealthService(session)
