"""Text-completion capability consumed by the LLM-backed evaluators.

The evaluators only need ``await completer.complete(prompt) -> str``; they
never construct a client themselves. ``ChatModelCompleter`` adapts any
LangChain chat model to that shape, and tests pass an ``AsyncMock``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol, runtime_checkable

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from pydantic import BaseModel

from api_inspector.evaluator.exceptions import LLMError
from api_inspector.utils.structured_output import extract_text_content

logger = logging.getLogger(__name__)


@runtime_checkable
class TextCompleter(Protocol):
    async def complete(self, prompt: str) -> str: ...


class ChatModelCompleter:
    """Send a single-message prompt to a chat model and return its text.

    Attributes:
        llm: The LangChain chat model; stateless per call, safe to share.
    """

    def __init__(self, llm: BaseChatModel) -> None:
        self.llm = llm

    async def complete(self, prompt: str) -> str:
        try:
            response = await self.llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as exc:
            raise LLMError(
                f"Completion failed: {type(exc).__name__}: {exc}",
                context={"prompt_length": len(prompt), "model": type(self.llm).__name__},
            ) from exc
        return extract_text_content(response)


def serialize_output(output: Any) -> str:
    """Render an output tree as indented JSON for inclusion in a prompt."""
    if isinstance(output, BaseModel):
        output = output.model_dump(by_alias=True, mode="json")
    return json.dumps(output, indent=2, ensure_ascii=False, default=str)
