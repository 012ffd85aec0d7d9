"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render unmatched routes and other HTTP errors as plain text (404, 405, ...)."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(
    store_instance,
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Link store instance
        service_instance: Service instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Link Shortener",
        description="URL shortening service backed by a JSON file",
        version="1.0.0",
        # Every GET path outside the fixed routes is a short code lookup
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)

    # API routes first; the web router ends with the catch-all redirect route
    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
