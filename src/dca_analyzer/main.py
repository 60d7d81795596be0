"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dca_analyzer.config.settings import get_settings
from dca_analyzer.config.logging_config import setup_logging
from dca_analyzer.api.routers import analysis_router
from dca_analyzer.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Dollar-cost averaging backtests with dividend reinvestment",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(analysis_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
