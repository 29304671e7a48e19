"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reviewrot import __version__
from reviewrot.api import ReviewRotService
from reviewrot.config import Settings, load_config
from reviewrot.errors import InputValidationError

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[ReviewRotService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or load_config()
    service = service or ReviewRotService(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        service.close()

    app = FastAPI(
        title="ReviewRot API",
        description="Review freshness and profile health scoring for local businesses",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(request: Request, exc: InputValidationError):
        return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.exception("API error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Server error", "message": str(exc)},
        )

    from reviewrot.web.api.v1 import router as api_router
    app.include_router(api_router)

    return app


# Create default app instance
app = create_app()
