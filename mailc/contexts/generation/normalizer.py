"""
Placeholder Normalizer

Rewrites {{name}} and {{Parent.Child}} placeholders into Jinja2 references on
the generated data object, re-cased to the generated field names:

    {{firstName}}      -> {{ data.FirstName }}
    {{- order.id -}}   -> {{- data.Order.Id -}}

Placeholders that are not plain identifier paths (filters, calls, literals) are
left untouched.
"""

import re

from mailc.contexts.parsing.directive_patterns import PlaceholderPatterns
from mailc.utils.identifiers import to_field_name

# Name the render function passes the data object under
DATA_ROOT = "data"


def _normalize_reference(match: re.Match, root: str) -> str:
    path = ".".join(to_field_name(segment) for segment in match.group("path").split("."))
    return f"{{{{{match.group('left_trim')} {root}.{path} {match.group('right_trim')}}}}}"


def normalize_placeholders(text: str, root: str = DATA_ROOT) -> str:
    """
    Rewrite every identifier placeholder in text to address root's fields.

    Args:
        text: Subject or body template text
        root: Variable name the data object is rendered under

    Returns:
        Normalized template text
    """
    return PlaceholderPatterns.REFERENCE.sub(lambda m: _normalize_reference(m, root), text)
