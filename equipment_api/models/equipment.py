from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.sql import func

from equipment_api.models.base import Base

SERIAL_NUMBER_MAX_LENGTH = 20
SERIAL_NUMBER_UNIQUE_INDEX = "uq_equipment_serial_number_active"


class Equipment(Base):
    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True)
    equipment_type_id = Column(
        Integer,
        ForeignKey("equipment_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    serial_number = Column(String(SERIAL_NUMBER_MAX_LENGTH), nullable=False)
    remark = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True)  # soft delete marker

    # Serial numbers are unique among active rows only; soft-deleted rows free theirs
    __table_args__ = (
        Index(
            SERIAL_NUMBER_UNIQUE_INDEX,
            "serial_number",
            unique=True,
            postgresql_where=deleted_at.is_(None),
        ),
    )
