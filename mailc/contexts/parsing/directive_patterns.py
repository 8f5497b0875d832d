"""
Directive and Placeholder Patterns

Centralized regex patterns used for template parsing and placeholder normalization.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

import re
from dataclasses import dataclass

# Bare identifier as used in annotations and placeholders
IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"

# Placeholder delimiters with optional trim markers directly against the braces
PLACEHOLDER_OPEN = r"\{\{(?P<left_trim>-?)\s*"
PLACEHOLDER_CLOSE = r"\s*(?P<right_trim>-?)\}\}"


@dataclass(frozen=True)
class DirectivePatterns:
    """
    Line-level directive patterns.

    A directive must occupy its own line: only whitespace may surround the
    HTML comment that carries it.
    """

    # <!-- $Subject: Welcome {{username}} -->
    SUBJECT: re.Pattern = re.compile(r"^\s*<!--\s*\$Subject:\s*(?P<subject>.*?)\s*-->\s*$")

    # <!-- @type Order.ID int -->, <!-- @type items []Item -->, <!-- @type User -->
    TYPE_DECLARATION: re.Pattern = re.compile(
        rf"^\s*<!--\s*@type\s+(?P<name>{IDENTIFIER}(?:\.{IDENTIFIER})?)"
        r"(?:\s+(?P<type>(?:\[\])?[A-Za-z_][A-Za-z0-9_.]*))?\s*-->\s*$"
    )


@dataclass(frozen=True)
class PlaceholderPatterns:
    """
    Placeholder patterns for {{ ... }} substitution points.

    Both patterns share one delimiter grammar: a trim marker must touch its
    braces ({{- name -}}), so "{{ -name }}" is an expression, not a placeholder.
    """

    # Bare variables only ({{name}}, {{- name -}}); no dots or calls
    SIMPLE_VARIABLE: re.Pattern = re.compile(
        rf"{PLACEHOLDER_OPEN}(?P<name>{IDENTIFIER}){PLACEHOLDER_CLOSE}"
    )

    # Bare or dotted references ({{name}}, {{Parent.Child}}) with captured trim markers
    REFERENCE: re.Pattern = re.compile(
        rf"{PLACEHOLDER_OPEN}(?P<path>{IDENTIFIER}(?:\.{IDENTIFIER})*){PLACEHOLDER_CLOSE}"
    )


# Prefix marking a slice type in annotations (e.g. "[]Item")
SLICE_PREFIX = "[]"
