# src/samvada/chat/quick.py

import logging
from datetime import datetime
from pathlib import Path

from samvada.config.settings import AppConfig
from samvada.llms.base import LLMClient, LLMResponse, Message, Role

from .create import create_chat
from .transcript import ResponseMetadata, append_exchange

logger = logging.getLogger(__name__)


async def quick(question: str, client: LLMClient, *, config: AppConfig) -> LLMResponse:
    """Ask a single question with the configured system prompt.

    Raises:
        ValueError: The question is empty.
    """
    question = question.strip()
    if not question:
        raise ValueError("No question provided")

    messages = [
        Message(role=Role.SYSTEM, content=config.system_prompt),
        Message(role=Role.USER, content=question),
    ]
    return await client.complete(messages=messages)


def save_conversation(
    question: str,
    response: LLMResponse,
    *,
    config: AppConfig,
    directory: str | Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Save a quick exchange as a new chat document."""
    now = now or datetime.now().astimezone()
    name = f"conversation_{now.strftime('%Y%m%d_%H%M%S')}"
    file_path = create_chat(name, directory, config=config, now=now, open_turn=False)
    append_exchange(
        file_path,
        response.content,
        ResponseMetadata.from_response(response),
        question=question.strip(),
    )
    logger.info("Saved conversation to %s", file_path)
    return file_path
