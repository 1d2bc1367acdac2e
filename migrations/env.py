# migrations/env.py
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from equipment_api.db import SYNC_DRIVER, with_driver
from equipment_api.models import Base  # registers every table on the metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

_COMPARE = {"compare_type": True, "compare_server_default": True}


def _migration_url() -> str:
    """ALEMBIC_DATABASE_URL, then DATABASE_URL, then alembic.ini; always on psycopg."""
    raw = (
        os.getenv("ALEMBIC_DATABASE_URL")
        or os.getenv("DATABASE_URL")
        or config.get_main_option("sqlalchemy.url")
    )
    return with_driver(raw, SYNC_DRIVER).render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    context.configure(
        url=_migration_url(), target_metadata=target_metadata, literal_binds=True, **_COMPARE
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(_migration_url(), poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, **_COMPARE)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
