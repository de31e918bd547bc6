# src/samvada/chat/parser.py

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from samvada.errors import FileReferenceError
from samvada.llms.base import Message
from samvada.llms.base import Role as MessageRole

from .constants import (
    ASSISTANT_PREFIX,
    COMMENT_PREFIX,
    METADATA_CLOSE,
    METADATA_OPEN,
    USER_PREFIX,
)
from .frontmatter import parse_frontmatter
from .lines import LineSource
from .models import ChatDocument, MessageTurn, Role
from .references import FileSystem, LocalFileSystem, expand_reference, is_file_reference

logger = logging.getLogger(__name__)


def turn_role(line: str) -> Role | None:
    """Role started by this line, or None if the line does not start a turn.

    The prefix must sit at column 0.
    """
    if line.startswith(USER_PREFIX):
        return Role.USER
    if line.startswith(ASSISTANT_PREFIX):
        return Role.ASSISTANT
    return None


def is_metadata_comment(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith(METADATA_OPEN) and stripped.endswith(METADATA_CLOSE)


class ChatParser:
    """Turns chat document text into a ChatDocument.

    - Frontmatter first, then turns, from one shared line cursor
    - User turns: `<c>` lines dropped, `[[path]]` lines expanded
    - Assistant turns: one-line `<!-- ... -->` metadata dropped
    - strict=True: the first unreadable reference aborts the parse
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        defaults: Mapping[str, str] | None = None,
        strict: bool = True,
    ) -> None:
        self._fs = fs or LocalFileSystem()
        self._defaults = dict(defaults or {})
        self._strict = strict

    def parse(self, text: str, path: Path | None = None) -> ChatDocument:
        lines = LineSource(text)
        frontmatter, opened = parse_frontmatter(lines, self._defaults)
        if not opened:
            logger.debug("No frontmatter block found in %s", path or "<text>")
        turns = self.parse_messages(lines, path)

        logger.debug("Parsed system prompt: %s", frontmatter.get("system", ""))
        logger.debug("Using model: %s", frontmatter.get("model"))
        logger.debug("Parsed %d messages", len(turns))

        return ChatDocument(frontmatter=frontmatter, turns=tuple(turns), path=path)

    def parse_messages(
        self, lines: Iterable[str], path: Path | None = None
    ) -> list[MessageTurn]:
        turns: list[MessageTurn] = []
        role: Role | None = None
        content = ""

        for line in lines:
            new_role = turn_role(line)
            if new_role is not None:
                if role is not None:
                    turns.append(MessageTurn(role=role, content=content.strip()))
                role = new_role
                content = line.split(":", 1)[1].strip()
            elif not line.strip():
                continue
            elif role is Role.USER:
                content = self._process_user_line(line, content, path)
            elif role is Role.ASSISTANT:
                if not is_metadata_comment(line):
                    content = _append_line(content, line)

        if role is not None:
            turns.append(MessageTurn(role=role, content=content.strip()))
        return turns

    def _process_user_line(self, line: str, content: str, path: Path | None) -> str:
        if line.strip().startswith(COMMENT_PREFIX):
            return content
        if not is_file_reference(line):
            return _append_line(content, line)

        try:
            return content + expand_reference(line, path, self._fs)
        except FileReferenceError as e:
            if self._strict:
                raise
            logger.warning("Keeping placeholder for unreadable reference: %s", e)
            return content + e.placeholder


def _append_line(content: str, line: str) -> str:
    if content:
        return f"{content}\n{line.strip()}"
    return line.strip()


def parse(
    text: str,
    path: Path | None = None,
    *,
    fs: FileSystem | None = None,
    defaults: Mapping[str, str] | None = None,
    strict: bool = True,
) -> ChatDocument:
    """Parse chat document text.

    Args:
        text: Full document text.
        path: Location of the document. Relative `[[path]]` references
            resolve against its parent directory.
        fs: Filesystem used to read references.
        defaults: Frontmatter values used when the document omits a key.
        strict: Raise on the first unreadable reference instead of keeping
            a placeholder.

    Raises:
        FileReferenceError: A reference could not be read and strict is set.
    """
    return ChatParser(fs=fs, defaults=defaults, strict=strict).parse(text, path)


def parse_file(
    path: str | Path,
    *,
    fs: FileSystem | None = None,
    defaults: Mapping[str, str] | None = None,
    strict: bool = True,
) -> ChatDocument:
    path = Path(path)
    fs = fs or LocalFileSystem()
    logger.info("Parsing file: %s", path)
    text = fs.read_text(path)
    return parse(text, path, fs=fs, defaults=defaults, strict=strict)


def prepare_api_messages(document: ChatDocument) -> list[Message]:
    """System prompt first, then every turn in order."""
    messages = [Message(role=MessageRole.SYSTEM, content=document.system)]
    for turn in document.turns:
        messages.append(Message(role=MessageRole(turn.role.value), content=turn.content))
    logger.debug("Prepared %d API messages", len(messages))
    return messages
