"""Shared fixtures for mailc tests."""

import importlib.util
import sys
import uuid
from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the sample email templates."""
    return FIXTURES_PATH


@pytest.fixture
def write_template(tmp_path):
    """Write a template file under tmp_path/templates and return its path."""
    templates_dir = tmp_path / "templates"

    def _write(name: str, body: str) -> Path:
        path = templates_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def load_generated_module():
    """
    Import a generated .email.py file as a fresh module.

    Modules are registered in sys.modules while the test runs (dataclasses need
    it to resolve string annotations) and removed afterwards.
    """
    loaded = []

    def _load(path: Path):
        module_name = f"mailc_generated_{uuid.uuid4().hex}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        loaded.append(module_name)
        spec.loader.exec_module(module)
        return module

    yield _load

    for module_name in loaded:
        sys.modules.pop(module_name, None)
