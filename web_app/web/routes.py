"""Web interface routes implementation."""

import os
from fastapi import APIRouter, Request, status
from fastapi.responses import FileResponse, PlainTextResponse, RedirectResponse

router = APIRouter()

PAGE_NOT_FOUND = "404 Page not Found"


def _serve_public_file(request: Request, filename: str, media_type: str):
    """Serve a file from the configured public directory, or a plain 404."""
    public_dir = request.app.state.config.public_dir
    file_path = os.path.join(public_dir, filename)

    if os.path.isfile(file_path):
        return FileResponse(file_path, media_type=media_type)

    return PlainTextResponse(PAGE_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)


@router.get("/", include_in_schema=False)
async def homepage(request: Request):
    """Serve the homepage."""
    return _serve_public_file(request, "index.html", "text/html")


@router.get("/style.css", include_in_schema=False)
async def stylesheet(request: Request):
    """Serve the homepage stylesheet."""
    return _serve_public_file(request, "style.css", "text/css")


# Registered last: matches every remaining GET path, slashes included
@router.get("/{short_code:path}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    original_url = await service.get_original_url(short_code)

    if not original_url:
        return PlainTextResponse(
            "Shortened URL not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
