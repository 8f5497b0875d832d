"""
Email Module Generator

Converts ParsedTemplates into generated Python modules. Each module holds a data
class, a result class, the normalized subject/body template constants and a
render function built on Jinja2.

Naming, for a template file stem "simple":
- File:            simple.email.py
- Data class:      SimpleEmailData
- Result class:    SimpleEmailResult
- Render function: SimpleEmail
- Constants:       simpleEmailSubjectTemplate, simpleEmailHTMLTemplate
- Struct classes:  Simple<StructName>, suffixed with "Struct" on a name clash
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set

from jinja2 import Environment, TemplateSyntaxError

from mailc.contexts.generation.exceptions import (
    GenerationError,
    TemplateNameCollisionError,
    WriteError,
)
from mailc.contexts.generation.logger import (
    _log_warning,
    log_generation_complete,
    log_generation_start,
    log_unit_written,
)
from mailc.contexts.generation.normalizer import normalize_placeholders
from mailc.contexts.generation.registries import TemplateRegistry
from mailc.contexts.generation.type_mapping import ImportSet, TypeResolver
from mailc.contexts.parsing.template_data_structure import ParsedTemplate
from mailc.utils.file_io import atomic_write_text, ensure_directory
from mailc.utils.identifiers import lower_first, make_exported_name

OUTPUT_SUFFIX = ".email.py"
MODULE_TEMPLATE = "email_module"
RENDER_ERROR_CLASS = "RenderError"
STRUCT_CLASS_SUFFIX = "Struct"

# Names every generated module imports at module level
MODULE_IMPORTED_NAMES = frozenset(
    {"dataclass", "Any", "List", "Environment", "StrictUndefined", "TemplateError"}
)


@dataclass
class FieldSpec:
    """One annotated field of a generated data class."""

    name: str
    annotation: str


@dataclass
class ClassSpec:
    """A generated data class: name, docstring and fields in emission order."""

    name: str
    doc: str
    fields: List[FieldSpec] = field(default_factory=list)


@dataclass
class UnitNames:
    """Identifiers derived from a template's file stem."""

    base: str

    @property
    def data_class(self) -> str:
        return f"{self.base}EmailData"

    @property
    def result_class(self) -> str:
        return f"{self.base}EmailResult"

    @property
    def render_function(self) -> str:
        return f"{self.base}Email"

    @property
    def html_constant(self) -> str:
        return f"{lower_first(self.base)}EmailHTMLTemplate"

    @property
    def subject_constant(self) -> str:
        return f"{lower_first(self.base)}EmailSubjectTemplate"

    @property
    def reserved(self) -> Set[str]:
        """Module-level names a struct class must not take."""
        return {
            self.data_class,
            self.result_class,
            self.render_function,
            RENDER_ERROR_CLASS,
            *MODULE_IMPORTED_NAMES,
        }

    def struct_class(self, struct_name: str) -> str:
        return f"{self.base}{struct_name}"

    def struct_classes(self, struct_names: Iterable[str]) -> Dict[str, str]:
        """
        Map struct names to class names, in struct order.

        A class name that would shadow another generated name gets a "Struct"
        suffix (repeated until free), so "Email" in simple.html becomes
        SimpleEmailStruct rather than replacing the SimpleEmail render function.
        """
        taken = set(self.reserved)
        classes = {}
        for struct_name in struct_names:
            class_name = self.struct_class(struct_name)
            while class_name in taken:
                class_name += STRUCT_CLASS_SUFFIX
            taken.add(class_name)
            classes[struct_name] = class_name
        return classes

    @classmethod
    def for_template(cls, template: ParsedTemplate) -> "UnitNames":
        return cls(base=make_exported_name(template.stem))


def output_file_name(template: ParsedTemplate) -> str:
    """Generated file name for a template ("simple.email.py" for simple.html)."""
    return f"{template.stem}{OUTPUT_SUFFIX}"


def python_string_literal(text: str, indent: str = "    ") -> str:
    """
    Format text as Python source for a string constant.

    Single-line text becomes one literal; multi-line text becomes a parenthesized
    sequence of adjacent literals, one per line.

    Args:
        text: String to embed
        indent: Indentation for continuation lines

    Returns:
        Python expression evaluating to exactly text
    """
    lines = text.splitlines(keepends=True)
    if len(lines) <= 1:
        return repr(text)
    body = "\n".join(f"{indent}{line!r}" for line in lines)
    return f"(\n{body}\n)"


class EmailModuleGenerator:
    """Converts ParsedTemplates to generated Python module source."""

    def __init__(
        self,
        template_registry: Optional[TemplateRegistry] = None,
        type_resolver: Optional[TypeResolver] = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.type_resolver = type_resolver or TypeResolver()
        # Used only to syntax-check normalized email templates
        self._syntax_env = Environment(autoescape=True)

    def _check_template_syntax(self, text: str, template: ParsedTemplate, part: str) -> None:
        """Raise GenerationError if normalized template text is not valid Jinja2."""
        try:
            self._syntax_env.parse(text)
        except TemplateSyntaxError as e:
            raise GenerationError(
                f"Invalid template syntax in {part} (line {e.lineno})",
                source_path=template.file_path,
                original_error=e,
            ) from e

    def _build_struct_classes(
        self, template: ParsedTemplate, names: UnitNames, imports: ImportSet
    ) -> List[ClassSpec]:
        struct_classes = names.struct_classes(template.structs)

        specs = []
        for struct in template.structs.values():
            spec = ClassSpec(
                name=struct_classes[struct.name],
                doc=f"{struct.name} values for the {names.base} email.",
            )
            for parsed_field in struct.fields:
                annotation = self.type_resolver.resolve_field(
                    parsed_field.name, parsed_field.type, struct_classes, imports
                )
                spec.fields.append(FieldSpec(name=parsed_field.name, annotation=annotation))
            specs.append(spec)
        return specs

    def _build_data_class(
        self, template: ParsedTemplate, names: UnitNames, imports: ImportSet
    ) -> ClassSpec:
        """
        Data class with one field per top-level variable, then one per struct.

        Variables whose field name matches a struct (ignoring case) are dropped;
        the struct field wins.
        """
        struct_classes = names.struct_classes(template.structs)
        struct_keys = {name.lower() for name in template.structs}

        spec = ClassSpec(name=names.data_class, doc=f"Template data for the {names.base} email.")
        for variable in template.variables:
            if variable.field_name.lower() in struct_keys:
                _log_warning(
                    f"{template.file_path}: variable '{variable.name}' collides with a struct, "
                    f"omitting it from {names.data_class}"
                )
                continue
            annotation = self.type_resolver.resolve(variable.type, struct_classes, imports)
            spec.fields.append(FieldSpec(name=variable.field_name, annotation=annotation))

        for struct_name, class_name in struct_classes.items():
            spec.fields.append(FieldSpec(name=struct_name, annotation=class_name))
        return spec

    def generate_module(self, template: ParsedTemplate, version: str) -> str:
        """
        Generate module source for one template.

        Args:
            template: Parsed template
            version: Version string embedded in the header comment

        Returns:
            Python source text

        Raises:
            GenerationError: If a normalized template is not valid Jinja2 syntax
        """
        names = UnitNames.for_template(template)
        imports = ImportSet()

        has_subject = bool(template.subject)
        subject_text = normalize_placeholders(template.subject) if has_subject else ""
        html_text = normalize_placeholders(template.html)
        if has_subject:
            self._check_template_syntax(subject_text, template, "subject")
        self._check_template_syntax(html_text, template, "body")

        # Helper imports follow the annotation types seen while parsing
        struct_classes = names.struct_classes(template.structs)
        for type_name in template.types:
            self.type_resolver.resolve(type_name, struct_classes, imports)

        structs = self._build_struct_classes(template, names, imports)
        data_class = self._build_data_class(template, names, imports)

        exports = [spec.name for spec in structs] + [
            names.data_class,
            names.result_class,
            names.render_function,
            RENDER_ERROR_CLASS,
        ]

        module_template = self.template_registry.get_template(MODULE_TEMPLATE)
        return module_template.render(
            version=version,
            source_name=Path(template.file_path).name,
            source_literal=repr(Path(template.file_path).name),
            import_lines=imports.import_lines(),
            exports=exports,
            has_subject=has_subject,
            subject_constant=names.subject_constant,
            subject_literal=python_string_literal(subject_text),
            html_constant=names.html_constant,
            html_literal=python_string_literal(html_text),
            structs=structs,
            data_class=data_class,
            result_class=names.result_class,
            render_function=names.render_function,
            base_name=names.base,
        )


def _check_output_collisions(templates: Sequence[ParsedTemplate]) -> None:
    """Raise TemplateNameCollisionError if two templates share an output file."""
    sources: Dict[str, List[Path]] = {}
    for template in templates:
        sources.setdefault(output_file_name(template), []).append(Path(template.file_path))

    for output_name, paths in sources.items():
        if len(paths) > 1:
            raise TemplateNameCollisionError(output_name, paths)


def generate_code(
    templates: Sequence[ParsedTemplate],
    output_dir: Path,
    version: str,
    generator: Optional[EmailModuleGenerator] = None,
) -> List[Path]:
    """
    Generate one module per template into output_dir.

    The output directory is created if needed. Each file is written atomically,
    so a failure never leaves a truncated module behind; the first failure
    aborts the batch.

    Args:
        templates: Parsed templates
        output_dir: Destination directory
        version: Version string embedded in every generated file
        generator: Generator to use (defaults to EmailModuleGenerator())

    Returns:
        Written file paths, in template order

    Raises:
        TemplateNameCollisionError: If two templates map to the same file name
        GenerationError: If a template cannot be turned into a module
        WriteError: If the directory or a file cannot be written
    """
    start_time = time.time()
    output_dir = Path(output_dir)
    generator = generator or EmailModuleGenerator()

    _check_output_collisions(templates)
    log_generation_start(len(templates), output_dir, version)

    try:
        ensure_directory(output_dir)
    except OSError as e:
        raise WriteError(
            "Failed to create output directory", path=output_dir, original_error=e
        ) from e

    written = []
    for template in templates:
        source = generator.generate_module(template, version)
        output_path = output_dir / output_file_name(template)
        try:
            atomic_write_text(output_path, source)
        except OSError as e:
            raise WriteError(
                "Failed to write generated module",
                path=output_path,
                source_path=template.file_path,
                original_error=e,
            ) from e
        log_unit_written(template.file_path, output_path)
        written.append(output_path)

    log_generation_complete(len(written), output_dir, time.time() - start_time)
    return written
