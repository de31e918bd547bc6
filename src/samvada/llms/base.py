# src/samvada/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single message sent to the provider.

    Immutable. Stateless. Provider-agnostic.
    """

    role: Role
    content: str


@dataclass(frozen=True)
class Usage:
    """Token usage for a completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class LLMResponse:
    """Normalized LLM response.

    Provider details never leak outside the adapter. `id`, `model` and
    `created` are kept because they are written back into the transcript
    as metadata comments.
    """

    content: str
    finish_reason: Literal["stop", "length", "error"]
    usage: Usage
    latency_ms: float
    id: str = ""
    model: str = ""
    created: int = 0


class LLMClient(Protocol):
    """Protocol for LLM clients.

    - Stateless: Every call receives the full message list
    - Transport only: Retries only on network/rate-limit errors
    """

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Single completion. Stateless. Full message list required.

        Args:
            messages: System prompt followed by the whole conversation.
            temperature: Sampling temperature. None keeps the provider default.
            max_tokens: Maximum tokens in response.

        Returns:
            Normalized LLMResponse.

        Raises:
            Provider-specific errors after retry exhaustion.
        """
        ...
