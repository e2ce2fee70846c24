from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from i18n_proxy.app.api.main import api_router
from i18n_proxy.app.core.config import settings
from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.core.middleware import LanguageMiddleware
from i18n_proxy.app.core.translation import interceptor

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Starting {settings.PROJECT_NAME} with native language "
        f"{interceptor.native_language}, supported: {', '.join(settings.SUPPORTED_LANGUAGES)}"
    )
    try:
        yield
    finally:
        logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# Add Language/i18n middleware
app.add_middleware(LanguageMiddleware)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status": "error",
            "message": "An unexpected error occurred.",
            "action": "Please try again later.",
        },
    )


@app.get("/health", response_model=dict, tags=["health"])
async def health():
    return JSONResponse(
        content={"status": "healthy", "native_language": str(interceptor.native_language)},
        status_code=status.HTTP_200_OK,
    )


app.include_router(api_router, prefix=settings.API_V1_STR)
