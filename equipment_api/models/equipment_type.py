from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from equipment_api.models.base import Base


class EquipmentType(Base):
    __tablename__ = "equipment_types"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)  # e.g. TP-Link TL-WR74
    mask = Column(String(20), nullable=False)  # e.g. XXAAAAAXAA
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
