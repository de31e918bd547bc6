# src/samvada/config/credentials.py

"""API key lookup.

Precedence, highest first:

1. the `--api-key` command line flag
2. `.env` in the working directory
3. `.env` in the config directory (`~/.samvada/.env`)
4. the process environment

`resolve_api_key` is a pure function of those inputs. Reading the files and
the environment is left to the caller.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from dotenv import dotenv_values, set_key

from samvada.errors import MissingAPIKeyError

from .settings import get_config_dir

logger = logging.getLogger(__name__)

API_KEY_VAR = "OPENAI_API_KEY"
ENV_FILE_NAME = ".env"

ADD_OPENAI_KEY_MESSAGE = """OpenAI API key not found! Please set it using one of these methods:
1. Run the command with your API key using --api-key=your-api-key-here
2. Set it in your .env file
3. Set it as an environment variable:
   - Windows (Command Prompt): set OPENAI_API_KEY=your-api-key-here
   - Windows (PowerShell): $env:OPENAI_API_KEY='your-api-key-here'
   - Mac/Linux: export OPENAI_API_KEY=your-api-key-here"""


def resolve_api_key(
    cli_key: str | None,
    env_files: Sequence[Mapping[str, str | None]] = (),
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the API key by fixed precedence. Blank values are skipped.

    Raises:
        MissingAPIKeyError: No source provides a key.
    """
    if cli_key and cli_key.strip():
        logger.debug("Using API key from command line arguments")
        return cli_key.strip()

    for values in env_files:
        key = values.get(API_KEY_VAR)
        if key and key.strip():
            logger.debug("Using API key from .env file")
            return key.strip()

    key = (environ or {}).get(API_KEY_VAR)
    if key and key.strip():
        logger.debug("Using API key from environment variables")
        return key.strip()

    raise MissingAPIKeyError(ADD_OPENAI_KEY_MESSAGE)


def env_file_paths(cwd: Path, config_dir: Path) -> list[Path]:
    """Candidate `.env` files in precedence order."""
    return [cwd / ENV_FILE_NAME, config_dir / ENV_FILE_NAME]


def load_env_files(cwd: Path, config_dir: Path) -> list[dict[str, str | None]]:
    """Read the existing `.env` files in precedence order."""
    loaded = []
    for path in env_file_paths(cwd, config_dir):
        if path.is_file():
            logger.debug("Loading environment from %s", path.resolve())
            loaded.append(dotenv_values(path))
    return loaded


def save_api_key(api_key: str, config_dir: Path | None = None) -> Path:
    """Store the key in the config directory `.env` for later runs."""
    env_path = (config_dir or get_config_dir()) / ENV_FILE_NAME
    env_path.touch(exist_ok=True)
    set_key(env_path, API_KEY_VAR, api_key, quote_mode="never")
    logger.info("API key saved in %s", env_path)
    return env_path
