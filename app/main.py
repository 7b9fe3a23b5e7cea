"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import pages
from app.api.routes import router as api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.core.session_gate import SessionBoundaryMiddleware


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with settings injected into the edge gate; routes read them via get_settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="HireHive API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    register_exception_handlers(app)

    # Last added runs first: CORS wraps the gate.
    app.add_middleware(SessionBoundaryMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(pages.router)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "HireHive API"}

    return app


configure_logging(get_settings())
app = create_app()
