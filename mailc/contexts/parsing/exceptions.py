"""Custom exceptions for the parsing context."""

from pathlib import Path
from typing import Optional


class ReadError(Exception):
    """
    Exception raised when a template file or directory cannot be read.

    Attributes:
        message: Error description
        path: Path that could not be read
        original_error: The underlying OSError, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"\nPath: {path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
