# Imported by Alembic so that every table lands on Base.metadata
# equipment_api/models/__init__.py
from .base import Base
from .equipment import Equipment
from .equipment_type import EquipmentType

__all__ = [
    "Base",
    "Equipment",
    "EquipmentType",
]
