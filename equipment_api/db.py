# equipment_api/db.py
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from equipment_api.core.config import settings

ASYNC_DRIVER = "postgresql+asyncpg"
SYNC_DRIVER = "postgresql+psycopg"

engine: AsyncEngine
SessionLocal: async_sessionmaker[AsyncSession]


def with_driver(database_url: str, drivername: str) -> URL:
    """Point a PostgreSQL URL (postgres://, psycopg2, asyncpg, ...) at ``drivername``."""
    if database_url.startswith("postgres://"):
        database_url = "postgresql://" + database_url[len("postgres://") :]
    url = make_url(database_url)
    if url.get_backend_name() != "postgresql":
        return url
    return url.set(drivername=drivername)


def asyncpg_url(database_url: str) -> tuple[URL, dict]:
    """Return the asyncpg URL plus the connect_args its libpq-only options map to."""
    url = with_driver(database_url, ASYNC_DRIVER)
    if url.drivername != ASYNC_DRIVER:
        return url, {}
    query = dict(url.query)
    connect_args = {}
    if "sslmode" in query:
        # asyncpg takes the libpq sslmode value through `ssl`
        connect_args["ssl"] = query.pop("sslmode")
    query.pop("channel_binding", None)
    return url.set(query=query), connect_args


def configure_engine(database_url: str | None = None) -> None:
    """(Re)build the engine and session factory, e.g. for another DATABASE_URL."""
    global engine, SessionLocal

    url, connect_args = asyncpg_url(database_url or settings.database_url)
    engine = create_async_engine(url, pool_pre_ping=True, connect_args=connect_args)
    SessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_async_session() -> AsyncSession:
    async with SessionLocal() as session:
        yield session


configure_engine()
