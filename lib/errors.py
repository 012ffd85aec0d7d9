"""Error kinds raised by the shortening service.

Each error's message is the plain-text body sent back to the client.
"""


class ShortenerError(ValueError):
    """Base class for rejected shortening requests."""

    status_code = 400


class InvalidRequestError(ShortenerError):
    """Request body is not a JSON object of the expected shape."""


class MissingURLError(ShortenerError):
    """No target URL was supplied."""

    def __init__(self, message: str = "URL is required"):
        super().__init__(message)


class InvalidShortCodeError(ShortenerError):
    """Supplied short code failed validation."""


class ShortCodeExistsError(ShortenerError):
    """Short code is already mapped to a URL."""

    def __init__(self, short_code: str, message: str = "Short Code already exists"):
        super().__init__(message)
        self.short_code = short_code
