"""Tests for notary_ally.core.llm: LLMClient and response helpers."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notary_ally.core.llm import LLMClient, extract_text_from_response, infer_provider, safe_get_content


def _make_response(content="Hello"):
    msg = MagicMock()
    msg.content = content
    choice = MagicMock()
    choice.message = msg
    return MagicMock(choices=[choice])


class TestInferProvider:
    @pytest.mark.parametrize(
        "model,provider",
        [
            ("gemini/gemini-2.5-flash", "gemini"),
            ("anthropic/claude-sonnet-4-20250514", "anthropic"),
            ("gpt-4o-mini", "openai"),
            ("claude-3-haiku", "anthropic"),
        ],
    )
    def test_infer(self, model, provider):
        assert infer_provider(model) == provider


class TestResponseHelpers:
    def test_safe_get_content(self):
        assert safe_get_content(_make_response("Travis County")) == "Travis County"

    def test_no_choices(self):
        assert safe_get_content(MagicMock(choices=[]), default="x") == "x"

    def test_none_content(self):
        assert safe_get_content(_make_response(None)) == ""

    def test_content_blocks(self):
        blocks = [{"type": "text", "text": "42"}, {"type": "text", "text": ".5"}]
        assert extract_text_from_response(blocks) == "42.5"


class TestLLMClient:
    def test_defaults(self):
        client = LLMClient()
        assert client.model == "gemini/gemini-2.5-flash"
        assert client.provider == "gemini"

    def test_ask_sends_single_prompt_without_retries(self):
        client = LLMClient(api_key="k", timeout=5)
        with patch("litellm.completion", return_value=_make_response(" 42.5 ")) as completion:
            assert client.ask("How far?") == " 42.5 "
        kwargs = completion.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "How far?"}]
        assert kwargs["api_key"] == "k"
        assert kwargs["num_retries"] == 0
        assert kwargs["timeout"] == 5
        assert kwargs["model"] == "gemini/gemini-2.5-flash"

    def test_no_timeout_by_default(self):
        client = LLMClient(api_key="k")
        with patch("litellm.completion", return_value=_make_response("x")) as completion:
            client.ask("q")
        assert "timeout" not in completion.call_args.kwargs

    def test_errors_propagate(self):
        client = LLMClient(api_key="k")
        with patch("litellm.completion", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError, match="boom"):
                client.ask("q")

    @pytest.mark.asyncio
    async def test_aask(self):
        client = LLMClient(api_key="k")
        with patch("litellm.acompletion", new=AsyncMock(return_value=_make_response("Harris County"))):
            assert await client.aask("Where?") == "Harris County"
