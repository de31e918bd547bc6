# src/samvada/chat/__init__.py

"""Chat documents: parsing, validation and transcript updates.

Example:
    >>> from samvada.chat import parse
    >>>
    >>> document = parse("---\\nsystem: be terse\\n---\\nuser:\\nhi\\n")
    >>> document.turns
    (MessageTurn(role=<Role.USER: 'user'>, content='hi'),)
"""

from .frontmatter import parse_frontmatter, render_frontmatter, required_keys, template_keys
from .lint import lint_path, validate_directory, validate_file, validate_text
from .models import ChatDocument, Diagnostic, FileReference, MessageTurn, Role
from .parser import ChatParser, parse, parse_file, prepare_api_messages
from .references import FileSystem, LocalFileSystem, expand_reference

__all__ = [
    # Parsing
    "ChatParser",
    "parse",
    "parse_file",
    "parse_frontmatter",
    "prepare_api_messages",
    # Templates
    "render_frontmatter",
    "required_keys",
    "template_keys",
    # References
    "FileSystem",
    "LocalFileSystem",
    "expand_reference",
    # Validation
    "lint_path",
    "validate_directory",
    "validate_file",
    "validate_text",
    # Types
    "ChatDocument",
    "Diagnostic",
    "FileReference",
    "MessageTurn",
    "Role",
]
