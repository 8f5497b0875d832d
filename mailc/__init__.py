"""
mailc - Type-safe email templates

Compiles annotated HTML email templates into typed Python modules: a data class
describing the variables a template needs, a result class holding the rendered
output, and a render function that substitutes the data into the template.

Architecture:
- Parsing Context: Annotation directives -> ParsedTemplate intermediate representation
- Generation Context: ParsedTemplate -> generated Python module per template
"""

__version__ = "0.1.0"
