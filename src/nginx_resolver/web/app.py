"""
FastAPI Application for nginx-resolver.

Read-only introspection into the reverse proxy's site configuration files.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nginx_resolver import __version__
from nginx_resolver.config import Settings, load_settings
from nginx_resolver.logging_config import level_number
from nginx_resolver.service import ProxyResolutionService
from nginx_resolver.web.routes import cache, resolution

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or load_settings()

    app = FastAPI(
        title="nginx-resolver",
        description="Reverse proxy resolution for nginx site configurations",
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.resolution_service = ProxyResolutionService(
        settings.sites_dir,
        logger=logging.getLogger("nginx_resolver.service"),
    )

    app.include_router(resolution.router, tags=["resolution"])
    app.include_router(cache.router, tags=["cache"])

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/")
    async def root() -> dict:
        """Static service information."""
        return {
            "message": "nginx-resolver reverse proxy resolution API",
            "version": __version__,
        }

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "sites_dir": str(settings.sites_dir)}

    return app


def run_server(settings: Settings | None = None, host: str | None = None, port: int | None = None) -> None:
    """Run the FastAPI server with uvicorn.

    Args:
        settings: Loaded settings (read from the environment when omitted).
        host: Bind address override.
        port: Port override.
    """
    import uvicorn

    settings = settings or load_settings()
    host = host or settings.host
    port = port or settings.port

    logger.info("Serving %s on http://%s:%d", settings.sites_dir, host, port)
    uvicorn.run(create_app(settings), host=host, port=port, log_level=level_number(settings.log_level))
