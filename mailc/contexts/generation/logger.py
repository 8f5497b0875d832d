"""
Generation context logger.

Provides logging interface for the generation context with automatic [generate] prefix.
All generation modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[generate]"


def _log_info(message: str) -> None:
    """Log info message with [generate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [generate] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [generate] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [generate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_generation_start(count: int, output_dir: Path, version: str) -> None:
    """Log start of a generation batch."""
    _log_info(f"Generating {count} email module(s) into {output_dir}")
    _log_debug(f"Version: {version}")


def log_unit_written(source_path: Path, output_path: Path) -> None:
    """Log one generated module."""
    _log_debug(f"{Path(source_path).name} -> {output_path}")


def log_generation_complete(count: int, output_dir: Path, elapsed_time: float) -> None:
    """Log end of a generation batch."""
    _log_success(f"Generated {count} email module(s) into {output_dir} ({elapsed_time:.2f}s)")


def log_compile_result(result) -> None:
    """
    Log the outcome of a full compile run.

    Args:
        result: CompileResult from compile_templates()
    """
    if result.success:
        _log_success(
            f"Compiled {result.template_count} template(s) from {result.input_dir} "
            f"into {result.output_dir} ({result.time_s:.2f}s)"
        )
        for output_path in result.output_paths:
            _log_info(f"  Output: {output_path}")
    else:
        logger.error(f"{CONTEXT_PREFIX} Compilation failed ({result.time_s:.2f}s)")
        logger.error(f"{CONTEXT_PREFIX}   Error: {result.error}")
