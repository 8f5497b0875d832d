"""Custom exceptions for the generation context with output references."""

from pathlib import Path
from typing import List, Optional


class GenerationError(Exception):
    """
    Exception raised when a generated module cannot be produced.

    Attributes:
        message: Error description
        source_path: Template the module was generated from
        original_error: The original exception, if any
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if source_path:
            parts.append(f"\nTemplate: {source_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class WriteError(GenerationError):
    """
    Exception raised when the output directory or a generated file cannot be written.

    Attributes:
        path: Output path that could not be created or written
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.path = path
        if path:
            message = f"{message}: {path}"
        super().__init__(message, source_path=source_path, original_error=original_error)


class TemplateNameCollisionError(GenerationError):
    """
    Exception raised when several templates map to the same generated file.

    Attributes:
        output_name: Generated file name shared by the templates
        sources: Template paths that collide
    """

    def __init__(self, output_name: str, sources: List[Path]):
        self.output_name = output_name
        self.sources = sources
        listing = ", ".join(str(source) for source in sources)
        super().__init__(f"Templates {listing} would all generate {output_name}")
