"""
Code Template Registry

Loads and caches the Jinja2 templates used to emit generated modules.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
CODE_TEMPLATES_PATH = Path(
    os.getenv("MAILC_CODE_TEMPLATES_PATH", Path(__file__).parent / "template")
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for code generation.

    Templates are stored in mailc/contexts/generation/template/{name}.py.jinja
    and use custom delimiters so the {{ }} placeholders of the email templates
    they embed never clash with the code template's own syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the code templates. Defaults to
                            MAILC_CODE_TEMPLATES_PATH or the bundled template/ directory
        """
        if templates_path is None:
            templates_path = CODE_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Block tags sit on their own lines in code templates
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a code template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'email_module')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.py.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Code template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Path of the file backing the named code template."""
        return self.templates_path / f"{name}.py.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache
