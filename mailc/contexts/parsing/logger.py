"""
Parsing context logger.

Provides logging interface for the parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[parse]"


def _log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_parse_summary(template) -> None:
    """
    Log what was extracted from one template.

    Args:
        template: ParsedTemplate returned by parse_file()
    """
    inferred = sum(1 for variable in template.variables if variable.inferred)
    _log_debug(
        f"{Path(template.file_path).name}: subject={'yes' if template.subject else 'no'}, "
        f"structs={len(template.structs)}, variables={len(template.variables)} "
        f"({inferred} inferred)"
    )


def log_directory_parsed(directory: Path, count: int) -> None:
    """Log completion of a directory parse."""
    _log_info(f"Parsed {count} template(s) from {directory}")
