# tests/unit/llms/test_openai.py

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError

from samvada.llms.base import Message, Role
from samvada.llms.openai import OpenAILLMClient


@pytest.fixture
def mock_openai_response() -> MagicMock:
    """Create a mock OpenAI response."""
    response = MagicMock()
    response.id = "chatcmpl-123"
    response.model = "gpt-4o-mini-2024-07-18"
    response.created = 1_700_000_000
    response.choices = [MagicMock()]
    response.choices[0].message.content = "Hello! How can I help you?"
    response.choices[0].finish_reason = "stop"
    response.usage.prompt_tokens = 10
    response.usage.completion_tokens = 8
    response.usage.total_tokens = 18
    return response


class TestOpenAILLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_openai_response: MagicMock) -> None:
        """Test basic completion."""
        with patch("samvada.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key", model="gpt-4o-mini")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Hello!")]
            )

            assert response.content == "Hello! How can I help you?"
            assert response.finish_reason == "stop"
            assert response.usage.total_tokens == 18
            assert response.id == "chatcmpl-123"
            assert response.model == "gpt-4o-mini-2024-07-18"
            assert response.created == 1_700_000_000
            assert response.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_request_payload(self, mock_openai_response: MagicMock) -> None:
        """Test the messages and model sent to the SDK."""
        with patch("samvada.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key", model="gpt-x")
            await client.complete(
                messages=[
                    Message(role=Role.SYSTEM, content="Be terse."),
                    Message(role=Role.USER, content="Hi"),
                ]
            )

            kwargs = mock_client.chat.completions.create.call_args.kwargs
            assert kwargs["model"] == "gpt-x"
            assert kwargs["messages"] == [
                {"role": "system", "content": "Be terse."},
                {"role": "user", "content": "Hi"},
            ]

    def test_base_url_passed_to_sdk(self) -> None:
        with patch("samvada.llms.openai.AsyncOpenAI") as mock_openai:
            OpenAILLMClient(
                api_key="k", base_url="http://localhost:8080/v1", timeout=5.0
            )

            mock_openai.assert_called_once_with(
                api_key="k", base_url="http://localhost:8080/v1", timeout=5.0
            )

    def test_message_conversion(self) -> None:
        """Test message conversion to OpenAI format."""
        with patch("samvada.llms.openai.AsyncOpenAI"):
            client = OpenAILLMClient(api_key="test-key")

            converted = client._convert_messages(
                [
                    Message(role=Role.SYSTEM, content="You are helpful."),
                    Message(role=Role.USER, content="Hello"),
                    Message(role=Role.ASSISTANT, content="Hi there!"),
                ]
            )

            assert converted == [
                {"role": "system", "content": "You are helpful."},
                {"role": "user", "content": "Hello"},
                {"role": "assistant", "content": "Hi there!"},
            ]

    @pytest.mark.asyncio
    async def test_length_finish_reason(self, mock_openai_response: MagicMock) -> None:
        """Test that a truncated answer is mapped to length."""
        mock_openai_response.choices[0].finish_reason = "length"
        mock_openai_response.choices[0].message.content = None
        with patch("samvada.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key")
            result = await client.complete(messages=[Message(role=Role.USER, content="t")])

            assert result.finish_reason == "length"
            assert result.content == ""

    @pytest.mark.asyncio
    async def test_retries_connection_errors(self, mock_openai_response: MagicMock) -> None:
        """Test that transport errors are retried."""
        error = APIConnectionError(request=httpx.Request("POST", "https://api.test"))
        with patch("samvada.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.side_effect = [error, mock_openai_response]
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key")
            result = await client.complete(messages=[Message(role=Role.USER, content="t")])

            assert result.content == "Hello! How can I help you?"
            assert mock_client.chat.completions.create.await_count == 2

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self) -> None:
        with patch("samvada.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.side_effect = ValueError("bad request")
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key")
            with pytest.raises(ValueError):
                await client.complete(messages=[Message(role=Role.USER, content="t")])

            assert mock_client.chat.completions.create.await_count == 1
