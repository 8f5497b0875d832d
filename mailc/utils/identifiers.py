"""
Identifier helpers.

Pure functions that turn file names and annotation names into valid Python
identifiers for generated code. No generation logic lives here.
"""

import keyword

# Prefix used when a derived identifier does not start with a letter
IDENTIFIER_PREFIX = "X"


def upper_first(s: str) -> str:
    """Uppercase the first character of s."""
    if not s:
        return s
    return s[0].upper() + s[1:]


def lower_first(s: str) -> str:
    """Lowercase the first character of s."""
    if not s:
        return s
    return s[0].lower() + s[1:]


def make_exported_name(s: str) -> str:
    """
    Convert an arbitrary string (e.g., a file stem) into an exported identifier.

    Splits on every non-alphanumeric character, uppercases the first character
    of each chunk (the rest is kept as-is), and concatenates the chunks. If the
    result does not start with a letter it is prefixed with 'X'.

    Args:
        s: Input string

    Returns:
        Identifier such as "WelcomePersonalized" for "welcome-personalized"

    Examples:
        >>> make_exported_name("welcome_personalized")
        'WelcomePersonalized'
        >>> make_exported_name("2fa-code")
        'X2faCode'
        >>> make_exported_name("")
        'X'
    """
    words = []
    current = []

    for char in s:
        if char.isalnum():
            current.append(char)
        elif current:
            words.append(upper_first("".join(current)))
            current = []
    if current:
        words.append(upper_first("".join(current)))

    out = "".join(words)
    if not out:
        return IDENTIFIER_PREFIX
    if not out[0].isalpha():
        out = IDENTIFIER_PREFIX + out
    return out


def to_field_name(name: str) -> str:
    """
    Field name used in generated data classes for an annotation or placeholder name.

    Uppercases the first character; names that would collide with a Python
    keyword (e.g. "none" -> "None") get a trailing underscore.
    """
    field_name = upper_first(name)
    if keyword.iskeyword(field_name):
        field_name += "_"
    return field_name
