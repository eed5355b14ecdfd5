import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from readpulse.config import LOG_LEVEL
from readpulse.errors import ReadPulseError
from readpulse.routers import analytics, books, sessions, users

logger = logging.getLogger(__name__)


async def handle_domain_error(request: Request, exc: ReadPulseError) -> JSONResponse:
    logger.info(
        "%s %s -> %d %s: %s",
        request.method, request.url.path, exc.status_code, type(exc).__name__, exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = FastAPI(title="ReadPulse", version="0.1.0")
    app.add_exception_handler(ReadPulseError, handle_domain_error)
    app.include_router(users.router)
    app.include_router(books.router)
    app.include_router(sessions.router)
    app.include_router(analytics.router)
    return app


app = create_app()
