"""Unit tests for configuration loading."""

import pytest
from omegaconf.errors import OmegaConfBaseException

from mailc import __version__
from mailc.utils import config as config_module
from mailc.utils.config import ENV_VARIABLES, load_config


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Clear MAILC_* variables and point the default config file at nothing."""
    for env_name in ENV_VARIABLES:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_FILE", tmp_path / "absent.yaml")


@pytest.mark.unit
def test_defaults():
    """Test defaults when nothing is configured."""
    config = load_config()

    assert config.input == "./emails"
    assert config.output == "./internal/emails"
    assert config.version == __version__
    assert dict(config.type_aliases) == {}


@pytest.mark.unit
def test_environment_overrides_defaults(monkeypatch):
    """Test MAILC_* environment variables override defaults."""
    monkeypatch.setenv("MAILC_OUTPUT_DIR", "generated")
    monkeypatch.setenv("MAILC_VERSION", "v9")

    config = load_config()

    assert config.output == "generated"
    assert config.version == "v9"


@pytest.mark.unit
def test_yaml_file_overrides_environment(monkeypatch, tmp_path):
    """Test the YAML config file beats the environment."""
    monkeypatch.setenv("MAILC_INPUT_DIR", "from-env")
    config_file = tmp_path / "mailc.yaml"
    config_file.write_text("input: from-yaml\ntype_aliases:\n  Money: decimal.Decimal\n")

    config = load_config(config_file)

    assert config.input == "from-yaml"
    assert config.type_aliases["Money"] == "decimal.Decimal"


@pytest.mark.unit
def test_default_config_file_is_optional_but_used(monkeypatch, tmp_path):
    """Test the default config file is read when present."""
    config_file = tmp_path / "mailc.yaml"
    config_file.write_text("output: out\n")
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_FILE", config_file)

    assert load_config().output == "out"


@pytest.mark.unit
def test_overrides_win_and_none_is_ignored(tmp_path):
    """Test explicit overrides beat the file; None values are skipped."""
    config_file = tmp_path / "mailc.yaml"
    config_file.write_text("input: from-yaml\noutput: from-yaml\n")

    config = load_config(config_file, overrides={"input": "from-cli", "output": None})

    assert config.input == "from-cli"
    assert config.output == "from-yaml"


@pytest.mark.unit
def test_explicit_missing_config_file(tmp_path):
    """Test an explicitly requested config file must exist."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_unknown_keys_rejected(tmp_path):
    """Test the structured schema rejects unknown keys."""
    config_file = tmp_path / "mailc.yaml"
    config_file.write_text("inptu: typo\n")

    with pytest.raises(OmegaConfBaseException):
        load_config(config_file)
