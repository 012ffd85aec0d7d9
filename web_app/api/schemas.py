"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field, StrictStr, ValidationError
from typing import Optional

from lib.errors import InvalidRequestError


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    Fields are optional at this level so that a missing URL is reported by
    the service with its own message instead of a schema error.
    """

    url: Optional[StrictStr] = Field(None, description="The URL to shorten")
    short_code: Optional[StrictStr] = Field(
        None,
        alias="shortCode",
        description="Optional custom short code",
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
                {"url": "https://github.com/user/repo", "shortCode": "myrepo"},
            ]
        },
    }

    @classmethod
    def from_body(cls, body: bytes) -> "ShortenRequest":
        """Parse a raw request body.

        A body that is not JSON at all is an unexpected failure and its
        ValidationError propagates unchanged.

        Raises:
            InvalidRequestError: If the JSON is not an object of string fields
        """
        try:
            return cls.model_validate_json(body or b"")
        except ValidationError as e:
            first = e.errors()[0]
            if first["type"] == "json_invalid":
                raise
            location = ".".join(str(part) for part in first.get("loc", ()))
            detail = f"{location}: {first['msg']}" if location else first["msg"]
            raise InvalidRequestError(f"Invalid request body: {detail}") from e


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    success: bool = Field(True, description="Always true for a created link")
    short_code: str = Field(..., alias="shortCode", description="The short code now mapped to the URL")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {"success": True, "shortCode": "9f86d081"}
            ]
        },
    }
