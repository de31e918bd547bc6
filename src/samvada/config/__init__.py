from .credentials import load_env_files, resolve_api_key, save_api_key
from .settings import AppConfig, ensure_config_exists, get_config_dir, load_config

__all__ = [
    "AppConfig",
    "ensure_config_exists",
    "get_config_dir",
    "load_config",
    "load_env_files",
    "resolve_api_key",
    "save_api_key",
]
