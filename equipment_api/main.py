import sentry_sdk
import structlog
from fastapi import FastAPI, Request
from sentry_sdk.integrations.starlette import StarletteIntegration
from slowapi.errors import RateLimitExceeded
from starlette.middleware.cors import CORSMiddleware

from equipment_api.api import errors
from equipment_api.api.routers.equipment import router as equipment_router
from equipment_api.api.routers.equipment_types import router as equipment_types_router
from equipment_api.api.routers.healthz import router as healthz_router
from equipment_api.core.config import settings
from equipment_api.logging import setup_logging
from equipment_api.middleware.rate_limit import (
    limiter,
    rate_limit_middleware,
    rate_limited_response,
)
from equipment_api.middleware.request_id import request_id_middleware
from equipment_api.middleware.security_headers import security_headers_middleware


def _init_sentry() -> None:
    # No-op without a DSN
    if not settings.sentry_dsn:
        return
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.app_env,
        release=settings.release,
        integrations=[StarletteIntegration()],
        traces_sample_rate=settings.sentry_traces_rate,
        send_default_pii=False,
    )


def create_app() -> FastAPI:
    setup_logging()
    _init_sentry()

    app = FastAPI(
        title="Equipment Registry API",
        version="0.1.0",
        description=(
            "Equipment CRUD with serial number validation against equipment type masks.\n"
            "- `POST /equipment` accepts one serial number or a list (bulk)\n"
            "- collections are paginated with `page` / `per_page` (default 30)\n"
        ),
    )
    app.state.limiter = limiter

    # Middleware runs bottom-up: rate limit, security headers, then request id outermost
    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(security_headers_middleware)
    app.middleware("http")(request_id_middleware)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
            allow_headers=["*"],
        )

    errors.install(app)

    @app.exception_handler(RateLimitExceeded)
    async def _rate_limit_handler(request: Request, exc: RateLimitExceeded):
        info = getattr(request.state, "rate_limit_info", None)
        if not isinstance(info, dict):
            info = {"method": request.method, "limit": str(exc.detail)}
        return rate_limited_response(info)

    app.include_router(equipment_router)
    app.include_router(equipment_types_router)
    app.include_router(healthz_router)

    structlog.get_logger(__name__).info("app_startup", env=settings.app_env)
    return app


app = create_app()
