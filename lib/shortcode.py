"""Short code generation utilities."""

import re
import secrets
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    # Characters a generated code may contain
    ALPHANUMERIC = string.ascii_letters + string.digits
    # Characters a supplied code may contain
    CODE_CHARS = ALPHANUMERIC + "-_"

    _NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

    def __init__(self, default_bytes: int = 4):
        """Initialize short code generator.

        Args:
            default_bytes: Number of random bytes per code (hex doubles it)
        """
        if default_bytes < 1:
            raise ValueError("default_bytes must be at least 1")
        self.default_bytes = default_bytes

    def generate_random(self, num_bytes: Optional[int] = None) -> str:
        """Generate a random short code.

        Draws random bytes, hex-encodes them and drops anything that is not
        a letter or digit. Hex never yields such characters, so the result is
        always ``2 * num_bytes`` characters long.

        Args:
            num_bytes: Number of random bytes (uses default if not specified)

        Returns:
            Random short code
        """
        num_bytes = num_bytes or self.default_bytes
        code = secrets.token_bytes(num_bytes).hex()
        return self._NON_ALNUM.sub("", code)

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code has valid format (alphanumeric, hyphen, underscore).

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.CODE_CHARS for c in code)
