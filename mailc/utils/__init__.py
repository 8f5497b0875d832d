"""
Shared utilities for mailc.

Common functionality used across contexts:
- Identifier derivation for generated names
- Logging setup
- Configuration loading
- File operations
"""

from mailc.utils.identifiers import lower_first, make_exported_name, to_field_name, upper_first
from mailc.utils.timestamp import now

__all__ = ["lower_first", "make_exported_name", "now", "to_field_name", "upper_first"]
