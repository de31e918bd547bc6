# src/samvada/chat/models.py

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Role(str, Enum):
    """Speaker of a turn in a chat document."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class MessageTurn:
    """A single turn of the conversation.

    Content is trimmed. Metadata comments and annotations are already removed.
    """

    role: Role
    content: str


@dataclass(frozen=True)
class ChatDocument:
    """Parsed chat document.

    Immutable snapshot of one parse. Changes to the underlying file are made
    by textual append, never by re-serializing this object.
    """

    frontmatter: dict[str, str]
    turns: tuple[MessageTurn, ...]
    path: Path | None = None

    @property
    def system(self) -> str:
        return self.frontmatter.get("system", "")

    @property
    def model(self) -> str | None:
        return self.frontmatter.get("model")

    @property
    def api_endpoint(self) -> str | None:
        return self.frontmatter.get("api_endpoint")


@dataclass(frozen=True)
class FileReference:
    """A `[[path]]` line inside a user turn.

    `raw_path` is the path as written; `path` is where it resolves to.
    """

    token: str
    raw_path: str
    path: Path


@dataclass(frozen=True)
class Diagnostic:
    """One validation failure for one file."""

    message: str
    file_path: Path

    def __str__(self) -> str:
        return f"{self.file_path}: {self.message}"
