# setup.py
from setuptools import find_packages, setup

setup(
    name="equipment-registry",
    version="0.1.0",
    packages=find_packages(include=["equipment_api", "equipment_api.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.29",
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "SQLAlchemy[asyncio]>=2.0.25",
        "asyncpg>=0.29",
        "psycopg[binary]>=3.1",
        "alembic>=1.13",
        "structlog>=24.1",
        "sentry-sdk>=1.40",
        "slowapi>=0.1.9",
        "limits>=3.7",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "python-dotenv>=1.0",
        ],
    },
)
