"""Unit tests for the text-completion adapter."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from api_inspector.evaluator import ApiData
from api_inspector.evaluator.exceptions import LLMError
from api_inspector.utils.completion import ChatModelCompleter, TextCompleter, serialize_output


class TestChatModelCompleter:
    @pytest.mark.asyncio
    async def test_returns_text(self):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=AIMessage(content="1. YES"))
        completer = ChatModelCompleter(llm)

        assert await completer.complete("question") == "1. YES"
        messages = llm.ainvoke.await_args.args[0]
        assert messages == [HumanMessage(content="question")]

    @pytest.mark.asyncio
    async def test_wraps_provider_errors(self):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=ConnectionError("connection refused"))
        completer = ChatModelCompleter(llm)

        with pytest.raises(LLMError, match="connection refused") as exc_info:
            await completer.complete("question")
        assert exc_info.value.context["prompt_length"] == len("question")

    def test_satisfies_protocol(self):
        assert isinstance(ChatModelCompleter(MagicMock()), TextCompleter)


class TestSerializeOutput:
    def test_dict_is_indented_json(self):
        assert serialize_output({"a": [1]}) == json.dumps({"a": [1]}, indent=2)

    def test_pydantic_model_uses_aliases(self):
        data = ApiData.model_validate(
            {"endpoint": "/x", "endpoints": [{"method": "GET", "responseSchema": [{"status": 200}]}]}
        )
        assert '"responseSchema"' in serialize_output(data)

    def test_non_ascii_kept(self):
        assert "Mengambil" in serialize_output({"summary": "Mengambil daftar pengguna — semua"})
