"""API routes implementation."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from lib.errors import ShortenerError
from .schemas import ShortenRequest, ShortenResponse

router = APIRouter()

logger = logging.getLogger("link_shortener.api")


@router.get(
    "/links",
    summary="List links",
    description="Return the full short code -> URL mapping.",
)
async def list_links(request: Request):
    """Return every stored link."""
    service = request.app.state.service

    links = await service.list_links()

    return JSONResponse(content=links)


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"content": {"text/plain": {}}, "description": "Invalid request or short code already exists"},
        500: {"content": {"text/plain": {}}, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Optionally provide a custom short code.",
)
async def shorten_url(request: Request):
    """Create a shortened URL."""
    service = request.app.state.service

    body = await request.body()

    try:
        payload = ShortenRequest.from_body(body)
        result = await service.create_short_url(
            original_url=payload.url,
            short_code=payload.short_code,
        )
    except ShortenerError as e:
        return PlainTextResponse(str(e), status_code=e.status_code)
    except Exception:
        logger.exception("Unexpected error while shortening URL")
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return ShortenResponse(short_code=result["short_code"])
