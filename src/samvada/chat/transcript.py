# src/samvada/chat/transcript.py

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from samvada.llms.base import LLMResponse

from .constants import ASSISTANT_PREFIX, METADATA_CLOSE, METADATA_OPEN, USER_PREFIX

logger = logging.getLogger(__name__)


def format_created(created_at: datetime) -> str:
    """`2024-01-01 12:00:00 +02:00`: local time with a separated UTC offset."""
    offset = created_at.isoformat(timespec="seconds")[19:]
    return f"{created_at:%Y-%m-%d %H:%M:%S} {offset}"


@dataclass(frozen=True)
class ResponseMetadata:
    """Response details appended below an answer as comment lines."""

    model: str
    id: str
    created: str
    total_tokens: int

    @classmethod
    def from_response(cls, response: LLMResponse) -> "ResponseMetadata":
        if response.created:
            created_at = datetime.fromtimestamp(response.created).astimezone()
        else:
            created_at = datetime.now().astimezone()
        return cls(
            model=response.model,
            id=response.id,
            created=format_created(created_at),
            total_tokens=response.usage.total_tokens,
        )

    def comment_lines(self) -> list[str]:
        return [
            f"{METADATA_OPEN} model: {self.model} {METADATA_CLOSE}",
            f"{METADATA_OPEN} id: {self.id} {METADATA_CLOSE}",
            f"{METADATA_OPEN} created: {self.created} {METADATA_CLOSE}",
            f"{METADATA_OPEN} total_tokens: {self.total_tokens} {METADATA_CLOSE}",
        ]


def append_exchange(
    path: str | Path,
    answer: str,
    metadata: ResponseMetadata,
    question: str | None = None,
) -> None:
    """Append an answer (and optionally its question) to a chat file.

    Without a question the answer continues the existing transcript. An
    empty user turn is always opened for the next question.
    """
    parts = []
    if question is not None:
        parts.append(f"\n{USER_PREFIX}\n{question}\n\n")
    else:
        # the file may not end with a newline
        parts.append("\n\n")
    parts.append(f"{ASSISTANT_PREFIX}\n{answer}\n\n")
    parts.append("\n".join(metadata.comment_lines()) + "\n")
    parts.append(f"\n{USER_PREFIX}\n")

    with open(path, "a", encoding="utf-8") as f:
        f.write("".join(parts))
    logger.debug("Appended answer (%d chars) to %s", len(answer), path)
