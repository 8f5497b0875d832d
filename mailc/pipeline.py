"""
Compile Pipeline

Orchestrates a full run: collect *.html templates from a directory, parse each
one, and generate one module per template into the output directory.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from mailc.contexts.generation import (
    EmailModuleGenerator,
    GenerationError,
    TypeResolver,
    generate_code,
)
from mailc.contexts.generation.logger import log_compile_result
from mailc.contexts.parsing import ReadError, collect_template_files, parse_file


@dataclass
class CompileResult:
    """Result from compile_templates()."""

    success: bool
    input_dir: Optional[Path] = None
    output_dir: Optional[Path] = None
    template_count: int = 0
    output_paths: List[Path] = field(default_factory=list)
    error: Optional[str] = None
    time_s: float = 0.0


def compile_templates(
    input_dir: Path,
    output_dir: Path,
    version: str,
    type_aliases: Optional[Mapping[str, str]] = None,
) -> CompileResult:
    """
    Compile every template in input_dir into generated modules in output_dir.

    Parse and generation errors are caught and reported on the result rather
    than raised, so callers can turn them into an exit status.

    Args:
        input_dir: Directory holding *.html templates (not searched recursively)
        output_dir: Directory for generated modules, created if missing
        version: Version string embedded in generated files
        type_aliases: Extra annotation type -> Python type mappings

    Returns:
        CompileResult with success status, output paths and timing
    """
    start_time = time.time()
    input_dir = Path(input_dir)
    output_dir = Path(output_dir)

    try:
        files = collect_template_files(input_dir)
        if not files:
            raise ReadError("No .html files found in input directory", path=input_dir)

        templates = [parse_file(path) for path in files]

        generator = EmailModuleGenerator(type_resolver=TypeResolver(type_aliases))
        output_paths = generate_code(templates, output_dir, version, generator=generator)

        result = CompileResult(
            success=True,
            input_dir=input_dir,
            output_dir=output_dir,
            template_count=len(templates),
            output_paths=output_paths,
            time_s=time.time() - start_time,
        )
    except (ReadError, GenerationError) as e:
        result = CompileResult(
            success=False,
            input_dir=input_dir,
            output_dir=output_dir,
            error=str(e),
            time_s=time.time() - start_time,
        )

    log_compile_result(result)
    return result
