"""
Generation Context

Responsibilities:
- Normalizes {{ }} placeholders to references on the generated data object
- Resolves annotation type strings to Python annotations and imports
- Emits one generated module per ParsedTemplate from a Jinja2 code template
- Writes generated modules atomically to the output directory

Owns: Generated module layout, naming of generated identifiers
Never: Reads template files
"""

from mailc.contexts.generation.exceptions import (
    GenerationError,
    TemplateNameCollisionError,
    WriteError,
)
from mailc.contexts.generation.generator import (
    EmailModuleGenerator,
    UnitNames,
    generate_code,
    output_file_name,
)
from mailc.contexts.generation.normalizer import normalize_placeholders
from mailc.contexts.generation.type_mapping import TypeResolver

__all__ = [
    # Generation entry points
    "EmailModuleGenerator",
    "generate_code",
    "output_file_name",
    "UnitNames",
    # Building blocks
    "normalize_placeholders",
    "TypeResolver",
    # Errors
    "GenerationError",
    "TemplateNameCollisionError",
    "WriteError",
]
