# scripts/seed.py
"""Seed the equipment type catalogue and, optionally, sample equipment.

Idempotent: types are matched by name, equipment by active serial number.
"""

import argparse
import asyncio
import logging
import os
import sys

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Run from the repository root
sys.path.append(os.path.abspath("."))

from equipment_api.db import SessionLocal  # noqa: E402
from equipment_api.models import Equipment, EquipmentType  # noqa: E402
from equipment_api.utils.serial_mask import matches_mask  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

EQUIPMENT_TYPE_SEED: list[tuple[str, str]] = [
    ("TP-Link TL-WR74", "XXAAAAAXAA"),
    ("D-Link DIR-300", "NXXAAXZXaa"),
    ("D-Link DIR-300 E", "NAAAAXZXXX"),
]

# (type name, serial number, remark)
EQUIPMENT_SEED: list[tuple[str, str, str | None]] = [
    ("TP-Link TL-WR74", "0QWERTY1AB", "office, rack 1"),
    ("TP-Link TL-WR74", "A1BCDEF2GH", None),
    ("D-Link DIR-300", "1A2BC3-4xy", "warehouse"),
    ("D-Link DIR-300 E", "7ABCD1_2Z9", None),
]


async def get_or_create_type(sess: AsyncSession, name: str, mask: str) -> EquipmentType:
    result = await sess.execute(select(EquipmentType).where(EquipmentType.name == name))
    equipment_type = result.scalars().first()
    if equipment_type:
        if equipment_type.mask != mask:
            equipment_type.mask = mask
            await sess.flush()
        return equipment_type
    equipment_type = EquipmentType(name=name, mask=mask)
    sess.add(equipment_type)
    await sess.flush()
    return equipment_type


async def get_or_create_equipment(
    sess: AsyncSession, equipment_type: EquipmentType, serial_number: str, remark: str | None
) -> Equipment | None:
    if not matches_mask(equipment_type.mask, serial_number):
        logger.warning("Skipping %s: does not match mask %s", serial_number, equipment_type.mask)
        return None
    result = await sess.execute(
        select(Equipment).where(
            Equipment.serial_number == serial_number, Equipment.deleted_at.is_(None)
        )
    )
    equipment = result.scalars().first()
    if equipment:
        return equipment
    equipment = Equipment(
        equipment_type_id=equipment_type.id, serial_number=serial_number, remark=remark
    )
    sess.add(equipment)
    await sess.flush()
    return equipment


async def async_main(args: argparse.Namespace) -> int:
    async with SessionLocal() as sess:
        types = {}
        for name, mask in EQUIPMENT_TYPE_SEED:
            types[name] = await get_or_create_type(sess, name, mask)
        logger.info("Equipment types ready: %d", len(types))

        if args.with_equipment:
            created = 0
            for type_name, serial_number, remark in EQUIPMENT_SEED:
                if await get_or_create_equipment(sess, types[type_name], serial_number, remark):
                    created += 1
            logger.info("Sample equipment ready: %d", created)

        await sess.commit()
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed equipment types and sample equipment.")
    parser.add_argument(
        "--with-equipment",
        action="store_true",
        help="Also insert a few sample equipment rows.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.with_equipment and os.getenv("APP_ENV", "").lower() == "prod":
        logger.error("Sample equipment is not seeded when APP_ENV=prod.")
        return 1
    try:
        return asyncio.run(async_main(args))
    except Exception:  # noqa: BLE001
        logger.exception("Seed failed due to an unexpected error.")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
