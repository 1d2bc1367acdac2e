# tests/conftest.py
import os

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Optional local overrides; the suite itself needs no database
load_dotenv(".env.test", override=False)
os.environ["TESTING"] = "1"
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("SENTRY_DSN", "")
os.environ.setdefault("LOG_FORMAT", "json")

from equipment_api.api.deps import (  # noqa: E402 (import after env tweaks)
    get_equipment_service,
    get_equipment_type_service,
    get_health_service,
)
from equipment_api.main import create_app  # noqa: E402
from equipment_api.services.equipment_types import EquipmentTypeService  # noqa: E402
from equipment_api.services.equipments import EquipmentService  # noqa: E402
from tests.fakes import ROUTER_MASK, SWITCH_MASK, FakeUnitOfWork, InMemoryStore  # noqa: E402


@pytest.fixture
def store() -> InMemoryStore:
    s = InMemoryStore()
    s.add_type("TP-Link TL-WR74", ROUTER_MASK)
    s.add_type("D-Link DIR-300", SWITCH_MASK)
    return s


@pytest.fixture
def uow_factory(store):
    return lambda: FakeUnitOfWork(store)


@pytest.fixture
def equipment_service(uow_factory) -> EquipmentService:
    return EquipmentService(uow_factory)


@pytest.fixture
def equipment_type_service(uow_factory) -> EquipmentTypeService:
    return EquipmentTypeService(uow_factory)


class _StubHealthService:
    async def ok(self) -> dict:
        return {"ok": True}


@pytest.fixture
def app(equipment_service, equipment_type_service):
    application = create_app()
    application.dependency_overrides[get_equipment_service] = lambda: equipment_service
    application.dependency_overrides[get_equipment_type_service] = lambda: equipment_type_service
    application.dependency_overrides[get_health_service] = lambda: _StubHealthService()
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def app_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
