# src/samvada/chat/references.py

import logging
from pathlib import Path
from typing import Protocol

from samvada.errors import FileReferenceError

from .constants import REFERENCE_CLOSE, REFERENCE_OPEN
from .models import FileReference

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Filesystem access used by the parser and the linter.

    Swappable so the engine can run against an in-memory tree.
    """

    def read_text(self, path: Path) -> str:
        """Return the file contents.

        Raises OSError when the file cannot be read and UnicodeDecodeError
        when it is not UTF-8 text.
        """
        ...

    def exists(self, path: Path) -> bool: ...


class LocalFileSystem:
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return path.exists()


def is_file_reference(line: str) -> bool:
    """A reference is a line that, trimmed, is exactly `[[...]]`."""
    stripped = line.strip()
    return (
        stripped.startswith(REFERENCE_OPEN)
        and stripped.endswith(REFERENCE_CLOSE)
        and "\n" not in line
    )


def resolve_reference_path(raw_path: str, base_path: Path | None) -> Path:
    """Resolve a referenced path against the directory of the containing file.

    Escaped spaces (`\\ `) are unescaped first. Absolute paths are kept.
    """
    path = Path(raw_path.replace("\\ ", " "))
    if path.is_absolute():
        return path
    parent = base_path.parent if base_path is not None else Path(".")
    return parent / path


def parse_reference(token: str, base_path: Path | None) -> FileReference:
    stripped = token.strip()
    raw_path = stripped.removeprefix(REFERENCE_OPEN).removesuffix(REFERENCE_CLOSE)
    return FileReference(
        token=stripped,
        raw_path=raw_path,
        path=resolve_reference_path(raw_path, base_path),
    )


def expand_reference(
    token: str,
    base_path: Path | None,
    fs: FileSystem | None = None,
) -> str:
    """Return the text that replaces a `[[path]]` line inside a user turn.

    The reference itself is kept as a visible marker above the file contents.

    Raises:
        FileReferenceError: The target could not be read or is not UTF-8 text. The error carries
            the placeholder text to show in its place.
    """
    fs = fs or LocalFileSystem()
    reference = parse_reference(token, base_path)
    logger.debug("Expanding file reference %s -> %s", reference.token, reference.path)
    try:
        contents = fs.read_text(reference.path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read referenced file %s: %s", reference.path, e)
        raise FileReferenceError(reference.raw_path, reference.path, e) from e
    return f"\n\n[[{reference.raw_path}]]\n\n{contents}\n\n"
