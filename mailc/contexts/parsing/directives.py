"""
Directive Classifier

Classifies each template line as exactly one directive kind, checked in priority
order: subject, type declaration, body text. Lines that look like malformed
directives are body text; classification never fails.
"""

from dataclasses import dataclass
from typing import Optional, Union

from mailc.contexts.parsing.directive_patterns import DirectivePatterns


@dataclass(frozen=True)
class SubjectDirective:
    """<!-- $Subject: text --> with the trimmed subject text."""

    text: str


@dataclass(frozen=True)
class TypeDirective:
    """
    <!-- @type name [type] -->

    Attributes:
        name: Bare identifier ("inviteLink") or dotted path ("Order.ID")
        type: Annotated type, empty when omitted
    """

    name: str
    type: str = ""

    @property
    def is_dotted(self) -> bool:
        return "." in self.name

    @property
    def parent(self) -> str:
        """Struct segment of a dotted name (the whole name when not dotted)."""
        return self.name.split(".", 1)[0]

    @property
    def child(self) -> Optional[str]:
        """Field segment of a dotted name, None when not dotted."""
        if not self.is_dotted:
            return None
        return self.name.split(".", 1)[1]


@dataclass(frozen=True)
class BodyLine:
    """Any line that is not a directive, kept verbatim."""

    text: str


Directive = Union[SubjectDirective, TypeDirective, BodyLine]


def classify_line(line: str) -> Directive:
    """
    Classify a single template line.

    Args:
        line: One line of template text without its line terminator

    Returns:
        SubjectDirective, TypeDirective or BodyLine

    Examples:
        >>> classify_line("<!-- $Subject: Hi {{name}} -->")
        SubjectDirective(text='Hi {{name}}')
        >>> classify_line("<!-- @type Order.ID int -->")
        TypeDirective(name='Order.ID', type='int')
        >>> classify_line("<p>{{name}}</p>")
        BodyLine(text='<p>{{name}}</p>')
    """
    match = DirectivePatterns.SUBJECT.match(line)
    if match:
        return SubjectDirective(text=match.group("subject").strip())

    match = DirectivePatterns.TYPE_DECLARATION.match(line)
    if match:
        return TypeDirective(name=match.group("name"), type=match.group("type") or "")

    return BodyLine(text=line)
