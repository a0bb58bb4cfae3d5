# alice_api/main.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import timedelta
import logging
from typing import Optional
from dotenv import load_dotenv
load_dotenv()

from .settings import Settings, get_settings
from .errors import ApiError
from .core.models import ApiModel, utc_now_iso
from .auth.token_manager import JWTSessionTokenManager
from .storage.registry import StoreRegistry, build_store_registry
from .businesses.endpoints import businesses_router
from .staff.endpoints import staff_router
from .bookings.endpoints import bookings_router
from .leads.endpoints import leads_router
from .faqs.endpoints import faqs_router
from .insights.endpoints import insights_router

logger = logging.getLogger(__name__)


class HealthResponse(ApiModel):
    ok: bool = True
    service: str
    time: str


@asynccontextmanager
async def alice_app_lifespan(app_instance: FastAPI):
    """Open the stores on startup and release them on shutdown."""
    stores: StoreRegistry = app_instance.state.stores
    logger.info("Application startup initiated.")
    await stores.initialize()
    try:
        yield
    finally:
        logger.info("Application shutdown initiated.")
        await stores.teardown()


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected invalid request body for {request.method} {request.url.path}.")
    # The rejected input may be Infinity or NaN, which JSON cannot carry
    details = [{k: v for k, v in error.items() if k != "input"} for error in exc.errors()]
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body", "details": jsonable_encoder(details)},
    )


def create_app(settings: Optional[Settings] = None, stores: Optional[StoreRegistry] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted
        stores: Pre-built stores (tests inject their own); built from settings when omitted

    Raises:
        InsecureConfigurationError: if the settings are unsafe, e.g. production
            with the placeholder JWT secret
    """
    settings = settings or get_settings()

    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level="DEBUG" if settings.debug_mode else "INFO",
            format='%(asctime)s - %(name)s [%(levelname)s] - %(message)s'
        )

    settings.ensure_safe_for_startup()

    app = FastAPI(title=settings.app_name, lifespan=alice_app_lifespan)
    app.state.settings = settings
    app.state.stores = stores or build_store_registry(settings)
    app.state.token_manager = JWTSessionTokenManager(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        lifetime=timedelta(hours=settings.session_lifetime_hours),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.get("/", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(service=settings.app_name, time=utc_now_iso())

    app.include_router(businesses_router)
    app.include_router(staff_router)
    app.include_router(bookings_router)
    app.include_router(leads_router)
    app.include_router(faqs_router)
    app.include_router(insights_router)

    logger.info(f"{settings.app_name} application created (storage: {settings.storage_backend}).")
    return app


app = create_app()
