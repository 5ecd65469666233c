"""LLM factory with a three-provider cascade.

Attempts providers in this order:

1. **Google Gemini** via ``ChatGoogleGenerativeAI`` + API key.
2. **Anthropic Claude** via ``ChatAnthropic`` + API key.
3. **Ollama** (self-hosted) via ``ChatOllama`` + local server.

The evaluation engine never calls this module; the host builds a completer
once with :func:`get_completer` and passes it in.
"""

from __future__ import annotations

import logging

from langchain_core.language_models.chat_models import BaseChatModel

from api_inspector.config import get_settings
from api_inspector.utils.completion import ChatModelCompleter

logger = logging.getLogger(__name__)

_SETUP_HINTS = {
    "google": (
        "  Set GOOGLE_API_KEY in your .env file\n"
        "  Get an API key: https://aistudio.google.com/app/apikey\n"
    ),
    "anthropic": (
        "  Set ANTHROPIC_API_KEY in your .env file\n"
        "  Get an API key: https://console.anthropic.com/\n"
    ),
    "ollama": (
        "  Set OLLAMA_BASE_URL in your .env file (default: http://localhost:11434)\n"
        "  Pull a model: ollama pull qwen3:4b\n"
    ),
}


def _try_google() -> BaseChatModel | None:
    """Create a Gemini chat model, or ``None`` if no API key is configured."""
    settings = get_settings()

    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY not set: skipping Google provider")
        return None

    try:
        from langchain_google_genai import ChatGoogleGenerativeAI

        llm = ChatGoogleGenerativeAI(
            model=settings.google_model,
            google_api_key=settings.google_api_key,
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_tokens,
            timeout=settings.llm_request_timeout,
        )
        logger.info("LLM provider: Google Gemini (%s)", settings.google_model)
        return llm
    except Exception:
        logger.warning("Google Gemini initialization failed: falling back", exc_info=True)
        return None


def _try_anthropic() -> BaseChatModel | None:
    """Create a Claude chat model, or ``None`` if no API key is configured."""
    settings = get_settings()

    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY not set: skipping Anthropic provider")
        return None

    try:
        from langchain_anthropic import ChatAnthropic

        llm = ChatAnthropic(
            model=settings.anthropic_model,
            api_key=settings.anthropic_api_key,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout=settings.llm_request_timeout,
        )
        logger.info("LLM provider: Anthropic Claude (%s) [fallback]", settings.anthropic_model)
        return llm
    except Exception:
        logger.warning("Anthropic initialization failed", exc_info=True)
        return None


def _try_ollama() -> BaseChatModel | None:
    """Create an Ollama chat model, or ``None`` if no base URL is configured."""
    settings = get_settings()

    if not settings.ollama_base_url:
        logger.warning("OLLAMA_BASE_URL not set: skipping Ollama provider")
        return None

    try:
        from langchain_ollama import ChatOllama

        llm = ChatOllama(
            model=settings.ollama_chat_model,
            base_url=settings.ollama_base_url,
            temperature=settings.llm_temperature,
            num_predict=settings.ollama_num_predict,
            client_kwargs={"timeout": settings.ollama_request_timeout},
        )
        logger.info(
            "LLM provider: Ollama (%s) at %s [fallback]",
            settings.ollama_chat_model,
            settings.ollama_base_url,
        )
        return llm
    except Exception:
        logger.warning("Ollama initialization failed", exc_info=True)
        return None


_PROVIDERS = {
    "google": _try_google,
    "anthropic": _try_anthropic,
    "ollama": _try_ollama,
}


def get_llm(provider: str | None = None) -> BaseChatModel:
    """Return a configured chat model.

    Args:
        provider: ``"google"``, ``"anthropic"`` or ``"ollama"`` to try only
            that provider. When ``None``, tries Google → Anthropic → Ollama.

    Returns:
        A configured ``BaseChatModel`` instance.

    Raises:
        RuntimeError: When the requested (or any) provider fails.
    """
    if provider is not None:
        factory = _PROVIDERS.get(provider)
        if factory is None:
            raise RuntimeError(f"Unknown LLM provider: {provider!r}")
        llm = factory()
        if llm is not None:
            return llm
        raise RuntimeError(f"{provider} initialization failed.\n\n{_SETUP_HINTS[provider]}")

    for factory in _PROVIDERS.values():
        llm = factory()
        if llm is not None:
            return llm

    raise RuntimeError(
        "No LLM provider available. Configure at least one:\n\n"
        + "\n".join(f"  {name}:\n{hint}" for name, hint in _SETUP_HINTS.items())
    )


def get_completer(provider: str | None = None) -> ChatModelCompleter:
    """Build the text-completion capability the evaluators consume."""
    return ChatModelCompleter(get_llm(provider))
