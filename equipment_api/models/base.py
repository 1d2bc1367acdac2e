from sqlalchemy.orm import DeclarativeBase

# Primary keys are INTEGER (int4) columns
MAX_INTEGER_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """False for ids no row can have; asyncpg rejects them outright."""
    return 0 < value <= MAX_INTEGER_ID


class Base(DeclarativeBase):
    pass
