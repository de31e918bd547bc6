# src/samvada/chat/lint.py

"""Structural validation of chat documents.

The linter scans the raw text on its own instead of reusing the parser, so a
malformed file still gets precise, line-numbered diagnostics.

Checks run in order and stop at the first failing group:

1. every required frontmatter key is present with a value (all missing keys
   are reported together)
2. the frontmatter block is opened and closed by `---` lines
3. there is content after the last `---` line
4. the first message is a user turn
5. turns alternate user/assistant
6. the last turn is a user turn

File references are checked last. Every unresolved reference is reported.
"""

import logging
import re
from pathlib import Path

from .constants import COMMENT_PREFIX, FRONTMATTER_DELIMITER
from .frontmatter import required_keys
from .models import Diagnostic, Role
from .parser import turn_role
from .references import FileSystem, LocalFileSystem, is_file_reference, parse_reference

logger = logging.getLogger(__name__)


def validate_text(
    text: str,
    file_path: Path,
    fs: FileSystem | None = None,
) -> list[Diagnostic]:
    """Validate document text. An empty list means the document is valid."""
    fs = fs or LocalFileSystem()
    lines = text.splitlines()

    def fail(message: str) -> Diagnostic:
        return Diagnostic(message=message, file_path=file_path)

    missing = _missing_keys(text)
    if missing:
        return [fail(f"missing or empty frontmatter key '{key}'") for key in missing]

    delimiters = [i for i, line in enumerate(lines) if line.strip() == FRONTMATTER_DELIMITER]
    if not delimiters:
        return [fail("missing frontmatter block delimited by '---' lines")]
    if len(delimiters) < 2:
        return [fail("frontmatter block is not closed by a '---' line")]

    body = "\n".join(lines[delimiters[-1] + 1 :])
    if not body.strip():
        return [fail("no messages after frontmatter")]

    # (1-based line number, line) pairs after the closing delimiter
    start = delimiters[1] + 1
    region = [(start + offset + 1, line) for offset, line in enumerate(lines[start:])]

    violation = _check_turn_order(region)
    if violation:
        return [fail(violation)]

    return [fail(message) for message in _check_references(region, file_path, fs)]


def _missing_keys(text: str) -> list[str]:
    return [
        key
        for key in required_keys()
        if not re.search(rf"^[ \t]*{re.escape(key)}:[ \t]*\S", text, re.MULTILINE)
    ]


def _check_turn_order(region: list[tuple[int, str]]) -> str | None:
    first = next(((n, line) for n, line in region if line.strip()), None)
    if first is None:
        return "no messages after frontmatter"
    number, line = first
    if turn_role(line) is not Role.USER:
        return f"first message must be a user turn, found '{line.strip()}' at line {number}"

    expected = Role.USER
    last: tuple[int, str, Role] | None = None
    for number, line in region:
        role = turn_role(line)
        if role is None:
            continue
        if role is not expected:
            return (
                f"turns must alternate: expected '{expected.value}:' "
                f"but found '{line.strip()}' at line {number}"
            )
        last = (number, line, role)
        expected = Role.ASSISTANT if role is Role.USER else Role.USER

    if last is None:
        return "no 'user:' turn found at the start of a line"
    number, line, role = last
    if role is not Role.USER:
        return f"last message must be a user turn, found '{line.strip()}' at line {number}"
    return None


def _check_references(
    region: list[tuple[int, str]], file_path: Path, fs: FileSystem
) -> list[str]:
    problems = []
    role: Role | None = None
    for number, line in region:
        new_role = turn_role(line)
        if new_role is not None:
            role = new_role
            continue
        if role is not Role.USER or line.strip().startswith(COMMENT_PREFIX):
            continue
        if not is_file_reference(line):
            continue

        reference = parse_reference(line, file_path)
        if not fs.exists(reference.path):
            problems.append(
                f"file reference '{reference.token}' not found "
                f"(resolved to {reference.path}) at line {number}"
            )
    return problems


def validate_file(path: str | Path, fs: FileSystem | None = None) -> list[Diagnostic]:
    """Validate one chat document. An empty list means the file is valid."""
    path = Path(path)
    fs = fs or LocalFileSystem()
    logger.debug("Linting file: %s", path)
    try:
        text = fs.read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return [Diagnostic(message=f"could not be read: {e}", file_path=path)]

    diagnostics = validate_text(text, path, fs)
    if diagnostics:
        logger.info("%s failed with %d diagnostic(s)", path, len(diagnostics))
    return diagnostics


def validate_directory_by_file(
    path: str | Path,
    pattern: str = "*",
    fs: FileSystem | None = None,
) -> dict[Path, list[Diagnostic]]:
    """Validate every regular file directly inside a directory.

    One invalid or unreadable file never stops the others from being checked.
    Only reads go through `fs`; listing the directory always uses the local
    filesystem.

    Raises:
        NotADirectoryError: `path` is not a directory.
    """
    path = Path(path)
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")

    logger.info("Linting directory: %s (pattern=%s)", path, pattern)
    results = {
        file_path: validate_file(file_path, fs)
        for file_path in sorted(path.glob(pattern))
        if file_path.is_file()
    }
    logger.info("Linted %d files", len(results))
    return results


def validate_directory(
    path: str | Path,
    pattern: str = "*",
    fs: FileSystem | None = None,
) -> list[Diagnostic]:
    """Diagnostics of every file in the directory, in file order."""
    results = validate_directory_by_file(path, pattern, fs)
    return [diagnostic for diagnostics in results.values() for diagnostic in diagnostics]


def lint_path(path: str | Path, pattern: str = "*") -> bool:
    """Lint a file or a directory and print one line per outcome.

    Returns:
        True when every linted file is valid.

    Raises:
        FileNotFoundError: `path` does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Invalid path: {path}")

    if path.is_dir():
        results = validate_directory_by_file(path, pattern)
    else:
        results = {path: validate_file(path)}

    for file_path, diagnostics in results.items():
        if not diagnostics:
            print(f"{file_path} is valid.")
        for diagnostic in diagnostics:
            print(diagnostic)

    return all(not diagnostics for diagnostics in results.values())
