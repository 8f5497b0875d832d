"""
Parsing Context

Responsibilities:
- Classifies template lines into directives (subject, type declaration, body)
- Builds the ParsedTemplate intermediate representation
- Infers string variables for undeclared placeholders
- Collects template files from directories

Owns: Directive grammar, ParsedTemplate
Never: Emits generated code
"""

from mailc.contexts.parsing.directives import (
    BodyLine,
    SubjectDirective,
    TypeDirective,
    classify_line,
)
from mailc.contexts.parsing.exceptions import ReadError
from mailc.contexts.parsing.parser import (
    collect_template_files,
    infer_simple_variables,
    parse_dir,
    parse_file,
    parse_text,
)
from mailc.contexts.parsing.template_data_structure import (
    ParsedField,
    ParsedStruct,
    ParsedTemplate,
    ParsedVariable,
)

__all__ = [
    # Directive classification
    "BodyLine",
    "SubjectDirective",
    "TypeDirective",
    "classify_line",
    # Parsing entry points
    "collect_template_files",
    "infer_simple_variables",
    "parse_dir",
    "parse_file",
    "parse_text",
    "ReadError",
    # Intermediate representation
    "ParsedField",
    "ParsedStruct",
    "ParsedTemplate",
    "ParsedVariable",
]
