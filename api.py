from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware import Middleware
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.handler import init as init_exception_handlers
from src.core.logging import configure_logging, get_logger
from src.core.middlewares.logging import LoggingMiddleware
from src.modules.country_picker.router import router as country_picker_router
from src.modules.health.router import router as health_router

configure_logging()
logger = get_logger(__name__)

environment: str = settings.ENVIRONMENT
docs_enabled: bool = settings.ENABLE_DOCS and environment != "production"

middleware_list: list[Middleware] = [
    Middleware(LoggingMiddleware),  # ty:ignore[invalid-argument-type]
]

if settings.BACKEND_CORS_ORIGINS:
    middleware_list.insert(
        0,
        Middleware(
            CORSMiddleware,  # ty:ignore[invalid-argument-type]
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        ),
    )

openapi_tags = [
    {"name": "Country Codes", "description": "Country picker with dial codes and flags"},
    {"name": "Health", "description": "Health Check Endpoint"},
]


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """
    Application lifespan events.

    Startup:
        - Build the country directory for the default locale so requests never do it
    """
    logger.info("Application startup: Initializing resources...")

    from src.modules.country_picker.dependencies import initialize_country_directory

    initialize_country_directory()
    logger.info(f"Country directory for '{settings.PICKER_LOCALE}' initialized")

    yield

    logger.info("Application shutdown")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Country code picker API",
    version="1.0",
    middleware=middleware_list,
    openapi_tags=openapi_tags,
    lifespan=lifespan,
    docs_url="/api/docs" if docs_enabled else None,
    redoc_url="/api/redoc" if docs_enabled else None,
    openapi_url="/api/openapi.json" if docs_enabled else None,
)

init_exception_handlers(app)

api_v1_router = APIRouter(prefix=settings.API_V1_STR)
api_v1_router.include_router(router=country_picker_router, prefix="/country-codes", tags=["Country Codes"])

app.include_router(api_v1_router)
app.include_router(router=health_router)


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
