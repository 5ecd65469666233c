"""Helpers for turning raw LLM responses into text and JSON.

Provides ``extract_text_content()`` for chat-model responses, which may be a
plain string or a list of typed content blocks (Gemini thinking models), and
``parse_json_response()`` for responses that should contain a JSON object
but often arrive wrapped in code fences or prose.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from api_inspector.evaluator.exceptions import OutputParseError

logger = logging.getLogger(__name__)


def extract_json(content: str) -> str:
    """Extract JSON from an LLM response, handling code blocks."""
    match = re.search(r"```(?:json)?\s*\n?(.*?)```", content, re.DOTALL | re.IGNORECASE)
    if match:
        return match.group(1).strip()

    brace_match = re.search(r"\{.*\}", content, re.DOTALL)
    if brace_match:
        return brace_match.group(0).strip()

    return content.strip()


def extract_text_content(response: object) -> str:
    """Extract text from a chat-model response, handling Gemini thinking model format.

    Gemini 2.5 thinking models may return ``response.content`` as a list of
    typed blocks like::

        [
            {"type": "thinking", "thinking": "...", "signature": "..."},
            {"type": "text", "text": "actual answer here"},
        ]
    """
    content = getattr(response, "content", None)
    if content is None:
        return ""

    if isinstance(content, str):
        return content

    if isinstance(content, list):
        text_parts: list[str] = []
        for block in content:
            if isinstance(block, dict):
                if block.get("type") != "thinking" and "text" in block:
                    text_parts.append(block["text"])
            elif isinstance(block, str):
                text_parts.append(block)
            elif hasattr(block, "text") and getattr(block, "type", "") != "thinking":
                text_parts.append(str(block.text))
        if not text_parts and content:
            logger.warning(
                "Response content is a list with %d blocks but no text content found",
                len(content),
            )
        return "\n".join(text_parts)

    logger.warning(
        "Unexpected response.content type %s, coercing to string",
        type(content).__name__,
    )
    return str(content)


def parse_json_response(content: str) -> dict[str, Any]:
    """Parse a JSON object out of a raw LLM response.

    Args:
        content: The raw response text.

    Returns:
        The decoded object.

    Raises:
        OutputParseError: If no JSON object can be decoded.
    """
    if not content or not content.strip():
        raise OutputParseError("Empty response", context={"response_length": 0})

    json_str = extract_json(content)
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise OutputParseError(
            f"Response is not valid JSON: {exc}",
            context={"response_length": len(content)},
        ) from exc

    if not isinstance(data, dict):
        raise OutputParseError(
            f"Expected a JSON object, got {type(data).__name__}",
            context={"response_length": len(content)},
        )
    return data
