"""
Parsed Template Data Structures

Defines the intermediate representation produced by the parser and consumed by
the generator. One ParsedTemplate exists per template file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from mailc.contexts.parsing.directive_patterns import SLICE_PREFIX
from mailc.utils.identifiers import to_field_name


def _is_slice(type_name: str) -> bool:
    return type_name.startswith(SLICE_PREFIX)


def _element_type(type_name: str) -> str:
    return type_name[len(SLICE_PREFIX) :] if _is_slice(type_name) else type_name


@dataclass
class ParsedField:
    """
    Field of a struct declared through a dotted annotation (@type Order.ID int).

    Attributes:
        name: Field name, first character uppercased ("ID")
        type: Annotated type string, may be empty when the field names a struct
    """

    name: str
    type: str = ""

    @property
    def is_slice(self) -> bool:
        return _is_slice(self.type)

    @property
    def element_type(self) -> str:
        return _element_type(self.type)


@dataclass
class ParsedStruct:
    """
    Record type discovered via @type annotations.

    Attributes:
        name: Struct name, first character uppercased ("Order")
        fields: Fields in encounter order
    """

    name: str
    fields: List[ParsedField] = field(default_factory=list)

    def get_field(self, name: str) -> Optional[ParsedField]:
        for parsed_field in self.fields:
            if parsed_field.name == name:
                return parsed_field
        return None


@dataclass
class ParsedVariable:
    """
    Top-level (non-nested) template variable.

    Attributes:
        name: Name as written in the template ("inviteLink")
        type: Annotated type string ("string", "int", "[]Item")
        inferred: True when added from a {{name}} placeholder without an annotation
    """

    name: str
    type: str
    inferred: bool = False

    @property
    def field_name(self) -> str:
        """Name of the generated data class field ("InviteLink")."""
        return to_field_name(self.name)

    @property
    def is_slice(self) -> bool:
        return _is_slice(self.type)

    @property
    def element_type(self) -> str:
        return _element_type(self.type)


@dataclass
class ParsedTemplate:
    """
    Intermediate representation of one template file.

    Attributes:
        file_path: Source location (diagnostics only)
        subject: Subject line text, empty when no subject was declared
        html: Template body with all directive lines removed
        structs: Structs keyed by name, in first-mention order
        variables: Top-level variables in declaration, then inference, order
        types: Distinct annotation type strings in first-seen order
    """

    file_path: Path
    subject: str = ""
    html: str = ""
    structs: Dict[str, ParsedStruct] = field(default_factory=dict)
    variables: List[ParsedVariable] = field(default_factory=list)
    types: List[str] = field(default_factory=list)

    @property
    def stem(self) -> str:
        """File name without extension ("welcome" for welcome.html)."""
        return Path(self.file_path).stem

    def get_or_create_struct(self, name: str) -> ParsedStruct:
        """Return the struct called name, creating it on first mention."""
        if name not in self.structs:
            self.structs[name] = ParsedStruct(name=name)
        return self.structs[name]

    def get_variable(self, name: str) -> Optional[ParsedVariable]:
        for variable in self.variables:
            if variable.name == name:
                return variable
        return None

    def add_type(self, type_name: str) -> None:
        """Record a type string once, ignoring empty types."""
        if type_name and type_name not in self.types:
            self.types.append(type_name)

    def collides_with_struct(self, name: str) -> bool:
        """Whether name's field form matches a struct name, ignoring case."""
        field_name = to_field_name(name).lower()
        return any(struct_name.lower() == field_name for struct_name in self.structs)

    def collides_with_variable(self, name: str) -> bool:
        """Whether name maps to the same data class field as a declared variable."""
        field_name = to_field_name(name)
        return any(variable.field_name == field_name for variable in self.variables)
