"""Custom exception hierarchy for the criteria evaluation engine."""

from __future__ import annotations


class EvaluatorError(Exception):
    """Base exception for all evaluator errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of extra context for logging/debugging.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class LLMError(EvaluatorError):
    """Raised when a text-completion call fails."""


class ConfigurationError(EvaluatorError):
    """Raised when configuration loading or validation fails."""


class CriteriaConfigError(ConfigurationError):
    """Raised when a criteria file is unreadable or malformed."""


class OutputParseError(EvaluatorError):
    """Raised when a generated API description cannot be parsed."""


# ── Fatal error detection ────────────────────────────

# Error substrings that indicate the LLM provider is misconfigured or
# the account has a billing/quota problem.
_FATAL_PATTERNS: list[str] = [
    # Anthropic
    "credit balance is too low",
    "invalid x-api-key",
    "invalid api key",
    "authentication error",
    "billing",
    # Google Gemini
    "api key not valid",
    "quota exceeded",
    "resource exhausted",
    "permission_denied",
    "403 forbidden",
    "401 unauthorized",
    # Ollama
    "model not found",
    "connection refused",
    "failed to connect",
    # General
    "rate limit",
    "too many requests",
]


def is_fatal_llm_error(exc: BaseException) -> bool:
    """Return True if the exception indicates a provider-level problem.

    The evaluators never abort on these; they only log them louder so a
    misconfigured key is not mistaken for a batch of failing criteria.

    Args:
        exc: The exception caught from a completion call.

    Returns:
        True if retrying the same call would not help.
    """
    error_str = str(exc).lower()
    return any(pattern in error_str for pattern in _FATAL_PATTERNS)
