# src/samvada/chat/ask.py

import logging

from samvada.llms.base import LLMClient, LLMResponse

from .models import ChatDocument
from .parser import prepare_api_messages
from .transcript import ResponseMetadata, append_exchange

logger = logging.getLogger(__name__)


async def ask(document: ChatDocument, client: LLMClient) -> LLMResponse:
    """Send a parsed chat document to the model and append the answer.

    The document must come from a strict parse so that unreadable
    references abort before any request is sent.
    """
    if document.path is None:
        raise ValueError("Cannot append an answer to a document without a path")

    messages = prepare_api_messages(document)
    response = await client.complete(messages=messages)
    logger.info("Received answer for %s", document.path)

    append_exchange(
        document.path, response.content, ResponseMetadata.from_response(response)
    )
    logger.info("Appended answer to %s", document.path)
    return response
