# src/samvada/config/settings.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from samvada.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".samvada"
CONFIG_FILE_NAME = "config.yaml"

DEFAULT_CONFIG = """\
# Defaults used for new chat documents and quick questions.
system_prompt: You are a helpful assistant.
model: gpt-4o-mini
api_endpoint: https://api.openai.com/v1/chat/completions
"""


class AppConfig(BaseModel):
    system_prompt: str
    model: str
    api_endpoint: str

    class Config:
        extra = "forbid"

    def frontmatter_defaults(self) -> dict[str, str]:
        """Frontmatter values a chat document inherits when it omits them."""
        return {
            "system": self.system_prompt,
            "model": self.model,
            "api_endpoint": self.api_endpoint,
        }


def get_config_dir(home: Path | None = None) -> Path:
    """Return `~/.samvada`, creating it if needed."""
    config_dir = (home or Path.home()) / CONFIG_DIR_NAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def ensure_config_exists(config_dir: Path | None = None) -> Path:
    """Write the default config file on first use and return its path."""
    config_dir = config_dir or get_config_dir()
    config_path = config_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        logger.info("Creating default config file at: %s", config_path)
        config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    return config_path


def load_config(config_dir: Path | None = None) -> AppConfig:
    """Load the application config, creating the default file if missing.

    Raises:
        ConfigError: The file cannot be read, is not YAML, or has the
            wrong keys.
    """
    config_path = ensure_config_exists(config_dir)
    logger.debug("Loading config from %s", config_path)
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    try:
        return AppConfig(**(data or {}))
    except (TypeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e
