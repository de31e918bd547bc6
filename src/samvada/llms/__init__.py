# src/samvada/llms/__init__.py

"""LLM client layer for samvada.

A thin, stateless abstraction over chat completion providers.

Example:
    >>> from samvada.llms import create_llm_client, LLMConfig, Message, Role
    >>>
    >>> config = LLMConfig(provider="openai", model="gpt-4o-mini")
    >>> client = create_llm_client(config)
    >>>
    >>> response = await client.complete(
    ...     messages=[Message(role=Role.USER, content="Hello!")]
    ... )
    >>> print(response.content)
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig, base_url_from_endpoint
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "LLMConfig",
    "base_url_from_endpoint",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
