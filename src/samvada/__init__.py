# Chat documents
from .chat import (
    ChatDocument,
    Diagnostic,
    MessageTurn,
    Role,
    parse,
    parse_file,
    validate_directory,
    validate_file,
)

# Configuration
from .config import AppConfig, load_config, resolve_api_key

# Errors
from .errors import ChatError, ConfigError, FileReferenceError, MissingAPIKeyError

__all__ = [
    # Chat documents
    "ChatDocument",
    "Diagnostic",
    "MessageTurn",
    "Role",
    "parse",
    "parse_file",
    "validate_directory",
    "validate_file",
    # Configuration
    "AppConfig",
    "load_config",
    "resolve_api_key",
    # Errors
    "ChatError",
    "ConfigError",
    "FileReferenceError",
    "MissingAPIKeyError",
]
