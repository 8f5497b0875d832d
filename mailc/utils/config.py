"""
Configuration for mailc.

Settings come from (lowest to highest precedence):
1. Defaults declared on MailcConfig
2. Environment variables (a .env file is loaded with python-dotenv)
3. The YAML config file (mailc.yaml by default), loaded with OmegaConf
4. Explicit overrides (CLI flags)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from mailc import __version__

load_dotenv()

# Environment variable -> config key
ENV_VARIABLES = {
    "MAILC_INPUT_DIR": "input",
    "MAILC_OUTPUT_DIR": "output",
    "MAILC_VERSION": "version",
    "MAILC_LOGS_PATH": "logs_path",
}

DEFAULT_CONFIG_FILE = Path(os.getenv("MAILC_CONFIG", "mailc.yaml"))


@dataclass
class MailcConfig:
    """
    Compiler settings.

    Attributes:
        input: Directory containing HTML email templates
        output: Directory to write generated modules to
        version: Version string embedded in generated files
        logs_path: Base directory for session logs
        type_aliases: Extra annotation type -> Python type mappings
                      (e.g., {"Money": "decimal.Decimal"})
    """

    input: str = "./emails"
    output: str = "./internal/emails"
    version: str = __version__
    logs_path: str = "outs/logs"
    type_aliases: Dict[str, str] = field(default_factory=dict)


def _env_overrides() -> Dict[str, str]:
    """Collect config values set through environment variables."""
    return {
        key: os.environ[env_name]
        for env_name, key in ENV_VARIABLES.items()
        if os.environ.get(env_name)
    }


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> DictConfig:
    """
    Load the merged mailc configuration.

    Args:
        config_path: YAML config file. Defaults to MAILC_CONFIG / mailc.yaml, which
                     is optional; an explicitly passed path must exist.
        overrides: Highest-precedence values; None entries are ignored

    Returns:
        OmegaConf DictConfig validated against MailcConfig

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
    """
    config = OmegaConf.structured(MailcConfig)
    config = OmegaConf.merge(config, _env_overrides())

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        config = OmegaConf.merge(config, OmegaConf.load(config_path))
    elif DEFAULT_CONFIG_FILE.exists():
        config = OmegaConf.merge(config, OmegaConf.load(DEFAULT_CONFIG_FILE))

    if overrides:
        config = OmegaConf.merge(
            config, {key: value for key, value in overrides.items() if value is not None}
        )

    return config
