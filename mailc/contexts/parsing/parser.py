"""
Annotation Parser

Extracts directives (subject line, type declarations) from HTML email templates
and infers undeclared placeholder variables, producing a ParsedTemplate per file.

Directive syntax:
    <!-- $Subject: Welcome {{username}} -->
    <!-- @type inviteLink string -->      top-level variable
    <!-- @type Order -->                  struct
    <!-- @type Order.ID int -->           struct field (creates Order if needed)
"""

from pathlib import Path
from typing import Iterator, List

from mailc.contexts.parsing.directive_patterns import PlaceholderPatterns
from mailc.contexts.parsing.directives import (
    BodyLine,
    SubjectDirective,
    TypeDirective,
    classify_line,
)
from mailc.contexts.parsing.exceptions import ReadError
from mailc.contexts.parsing.logger import (
    _log_debug,
    _log_warning,
    log_directory_parsed,
    log_parse_summary,
)
from mailc.contexts.parsing.template_data_structure import (
    ParsedField,
    ParsedTemplate,
    ParsedVariable,
)
from mailc.utils.identifiers import to_field_name

TEMPLATE_GLOB = "*.html"
INFERRED_TYPE = "string"


def _iter_lines(text: str) -> Iterator[str]:
    """Yield lines split on '\\n' with any trailing '\\r' removed."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def _apply_type_directive(template: ParsedTemplate, directive: TypeDirective) -> None:
    """Record a @type directive in the template's structs or variables."""
    if not directive.is_dotted:
        if not directive.type:
            # Bare name without a type declares a struct
            template.get_or_create_struct(to_field_name(directive.name))
            return

        if template.collides_with_variable(directive.name):
            _log_warning(
                f"{template.file_path}: duplicate @type for field '{to_field_name(directive.name)}', "
                "keeping the first"
            )
            return
        template.variables.append(ParsedVariable(name=directive.name, type=directive.type))
        template.add_type(directive.type)
        return

    struct = template.get_or_create_struct(to_field_name(directive.parent))
    field_name = to_field_name(directive.child)
    if struct.get_field(field_name) is not None:
        _log_warning(
            f"{template.file_path}: duplicate field '{struct.name}.{field_name}', keeping the first"
        )
        return
    struct.fields.append(ParsedField(name=field_name, type=directive.type))
    template.add_type(directive.type)


def infer_simple_variables(template: ParsedTemplate) -> None:
    """
    Add undeclared {{var}} placeholders as string-typed top-level variables.

    Scans the subject first, then the body, in order of first occurrence. A name
    is skipped when it is already declared, when its field form matches a
    declared struct name ignoring case, or when it maps to the same field as a
    declared variable.

    Args:
        template: Template to update in place
    """
    candidates: List[str] = []
    for text in (template.subject, template.html):
        for match in PlaceholderPatterns.SIMPLE_VARIABLE.finditer(text):
            name = match.group("name")
            if name not in candidates:
                candidates.append(name)

    for name in candidates:
        if template.get_variable(name) is not None:
            continue
        if template.collides_with_struct(name):
            _log_debug(f"{template.file_path}: '{name}' matches a struct, not inferring a variable")
            continue
        if template.collides_with_variable(name):
            _log_debug(f"{template.file_path}: '{name}' maps to a declared variable field, skipping")
            continue

        template.variables.append(ParsedVariable(name=name, type=INFERRED_TYPE, inferred=True))
        template.add_type(INFERRED_TYPE)


def parse_text(text: str, file_path: Path) -> ParsedTemplate:
    """
    Parse template text into a ParsedTemplate.

    Never fails on malformed directives: lines that do not match a directive
    exactly are kept as body text. The first subject directive wins; later
    ones are removed from the body and ignored.

    Args:
        text: Raw template contents
        file_path: Source path, used for diagnostics and output naming

    Returns:
        ParsedTemplate with directive lines stripped from html
    """
    template = ParsedTemplate(file_path=Path(file_path))
    subject_seen = False
    body_lines = []

    for line in _iter_lines(text):
        directive = classify_line(line)

        if isinstance(directive, SubjectDirective):
            if subject_seen:
                _log_debug(f"{file_path}: ignoring additional subject '{directive.text}'")
                continue
            template.subject = directive.text
            subject_seen = True
        elif isinstance(directive, TypeDirective):
            _apply_type_directive(template, directive)
        elif isinstance(directive, BodyLine):
            body_lines.append(directive.text + "\n")

    template.html = "".join(body_lines)

    infer_simple_variables(template)
    log_parse_summary(template)
    return template


def parse_file(path: Path) -> ParsedTemplate:
    """
    Parse one template file.

    Args:
        path: Path to an .html template

    Returns:
        ParsedTemplate for the file

    Raises:
        ReadError: If the file cannot be read or decoded as UTF-8
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError("Failed to read template file", path=path, original_error=e) from e

    return parse_text(text, path)


def collect_template_files(directory: Path) -> List[Path]:
    """
    List the *.html templates directly inside directory, sorted by name.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        Sorted list of template paths, possibly empty

    Raises:
        ReadError: If directory does not exist or is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ReadError("Input directory does not exist", path=directory)

    return sorted(path for path in directory.glob(TEMPLATE_GLOB) if path.is_file())


def parse_dir(directory: Path) -> List[ParsedTemplate]:
    """
    Parse every *.html template under directory, recursively.

    Fails fast: the first unreadable file aborts the whole operation.

    Args:
        directory: Root directory to walk

    Returns:
        ParsedTemplates in sorted path order

    Raises:
        ReadError: If directory does not exist or any template cannot be read
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ReadError("Template directory does not exist", path=directory)

    templates = []
    for path in sorted(directory.rglob(TEMPLATE_GLOB)):
        if not path.is_file():
            continue
        try:
            templates.append(parse_file(path))
        except ReadError as e:
            raise ReadError(
                f"Failed to parse {path}", path=path, original_error=e.original_error
            ) from e

    log_directory_parsed(directory, len(templates))
    return templates
