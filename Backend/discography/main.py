from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from discography.api import albums, artists, health
from discography.core.config import settings
from discography.core.exceptions import DiscographyError, PersistenceError, ValidationError, INTERNAL_ERROR_MESSAGE
from discography.services.database import engine, SessionLocal
from discography.services.bootstrap import bootstrap
import logging
import uvicorn # For running programmatically



# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger("discography")
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed the demo catalogue before serving."""
    if settings.SEED_ON_STARTUP:
        await bootstrap(engine, SessionLocal)
    logger.info(f"Discography API started (env={settings.APP_ENV})")
    yield
    await engine.dispose()
    logger.info("Discography API shutting down")


app = FastAPI(title="Discography API", lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


def format_validation_errors(errors) -> str:
    """Collapse pydantic errors into one line, e.g. 'body.year: Field required'."""
    parts = []
    for e in errors:
        loc = ".".join(str(part) for part in e.get("loc", ()))
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts) or "Invalid request"


@app.exception_handler(DiscographyError)
async def discography_error_handler(request: Request, exc: DiscographyError):
    if isinstance(exc, PersistenceError):
        logger.error(f"Persistence failure on {request.url.path}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = ValidationError(format_validation_errors(exc.errors()))
    logger.warning(f"Validation error on {request.url.path}: {error.message}")
    return JSONResponse(status_code=error.status_code, content=error.to_response())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all, never leaks internal details"""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})


# Include routes
app.include_router(health.router, tags=["health"])
app.include_router(albums.router, tags=["albums"])
app.include_router(artists.router, tags=["artists"])


def run():
    uvicorn.run("discography.main:app", host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
