# src/samvada/llms/config.py

from dataclasses import dataclass
from typing import Literal

CHAT_COMPLETIONS_SUFFIX = "/chat/completions"


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for LLM clients.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["openai"]
    model: str
    api_key: str | None = None
    base_url: str | None = None  # None uses the provider default
    timeout: float = 60.0
    max_retries: int = 3


def base_url_from_endpoint(api_endpoint: str | None) -> str | None:
    """Strip a trailing `/chat/completions` from a full endpoint URL.

    Chat documents store the complete endpoint; the SDK wants the API root.
    """
    if not api_endpoint:
        return None
    endpoint = api_endpoint.strip().rstrip("/")
    return endpoint.removesuffix(CHAT_COMPLETIONS_SUFFIX)
