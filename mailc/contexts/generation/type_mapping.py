"""
Annotation Type Resolution

Maps the opaque type strings recorded by the parser ("string", "int", "[]Item",
"time.Time") to Python annotations for generated modules, and tracks which
imports those annotations need. Unknown type names are emitted verbatim.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Set

from mailc.contexts.parsing.directive_patterns import SLICE_PREFIX
from mailc.utils.identifiers import to_field_name

# Names that must be imported from typing when used
TYPING_NAMES = ("Any", "List")

# Annotation type -> Python annotation. A dotted target is imported by module.
BUILTIN_TYPE_ALIASES: Dict[str, str] = {
    # Text
    "string": "str",
    "str": "str",
    "rune": "str",
    # Integers
    "int": "int",
    "int8": "int",
    "int16": "int",
    "int32": "int",
    "int64": "int",
    "uint": "int",
    "uint8": "int",
    "uint16": "int",
    "uint32": "int",
    "uint64": "int",
    "byte": "int",
    # Floats
    "float": "float",
    "float32": "float",
    "float64": "float",
    # Booleans
    "bool": "bool",
    # Dynamic
    "any": "Any",
    "interface": "Any",
    # Dates and times
    "time.Time": "datetime.datetime",
    "datetime": "datetime.datetime",
    "date": "datetime.date",
    "time.Duration": "datetime.timedelta",
    "timedelta": "datetime.timedelta",
    # Decimals
    "decimal": "decimal.Decimal",
    "Decimal": "decimal.Decimal",
}


@dataclass
class ImportSet:
    """Imports required by the annotations of one generated module."""

    modules: Set[str] = field(default_factory=set)
    typing_names: Set[str] = field(default_factory=set)

    def add_annotation(self, annotation: str) -> None:
        if annotation in TYPING_NAMES:
            self.typing_names.add(annotation)
        elif "." in annotation:
            self.modules.add(annotation.rsplit(".", 1)[0])

    def import_lines(self) -> List[str]:
        """
        Import statements sorted by module name, always including dataclass.

        Returns:
            Lines such as ["from dataclasses import dataclass", "import datetime"]
        """
        lines = {"dataclasses": "from dataclasses import dataclass"}
        for module in self.modules:
            lines[module] = f"import {module}"
        if self.typing_names:
            lines["typing"] = f"from typing import {', '.join(sorted(self.typing_names))}"
        return [lines[module] for module in sorted(lines)]


class TypeResolver:
    """
    Resolves annotation type strings to Python annotations.

    Resolution order for a type name: declared struct (exact name), alias table,
    declared struct (first character uppercased), verbatim. A "[]" prefix wraps
    the element annotation in List[...].
    """

    def __init__(self, aliases: Optional[Mapping[str, str]] = None):
        """
        Initialize the resolver.

        Args:
            aliases: Extra or overriding entries for BUILTIN_TYPE_ALIASES
                     (e.g., {"Money": "decimal.Decimal"})
        """
        self.aliases: Dict[str, str] = {**BUILTIN_TYPE_ALIASES, **dict(aliases or {})}

    def resolve(
        self,
        type_name: str,
        struct_classes: Mapping[str, str],
        imports: Optional[ImportSet] = None,
    ) -> str:
        """
        Resolve one annotation type string.

        Args:
            type_name: Type as written in the template ("int", "[]Item")
            struct_classes: Struct name -> generated class name
            imports: Collects the imports the annotation needs

        Returns:
            Python annotation source text
        """
        imports = imports if imports is not None else ImportSet()

        if type_name.startswith(SLICE_PREFIX):
            element = self.resolve(type_name[len(SLICE_PREFIX) :], struct_classes, imports)
            imports.add_annotation("List")
            return f"List[{element}]"

        if type_name in struct_classes:
            return struct_classes[type_name]

        if type_name in self.aliases:
            annotation = self.aliases[type_name]
            imports.add_annotation(annotation)
            return annotation

        if to_field_name(type_name) in struct_classes:
            return struct_classes[to_field_name(type_name)]

        return type_name

    def resolve_field(
        self,
        field_name: str,
        type_name: str,
        struct_classes: Mapping[str, str],
        imports: Optional[ImportSet] = None,
    ) -> str:
        """
        Resolve a struct field, whose type may be empty.

        An empty type refers to the struct named like the field when one is
        declared, and to Any otherwise.
        """
        imports = imports if imports is not None else ImportSet()

        if type_name:
            return self.resolve(type_name, struct_classes, imports)
        if field_name in struct_classes:
            return struct_classes[field_name]
        imports.add_annotation("Any")
        return "Any"
