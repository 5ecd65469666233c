"""Centralized logging configuration for the inspector."""

from __future__ import annotations

import logging
import sys

_DEV_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
_PROD_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}'

# Provider SDKs log every request at INFO.
_NOISY_LOGGERS = [
    "httpx",
    "httpcore",
    "langchain",
    "langchain_core",
    "anthropic",
    "ollama",
    "google_genai",
]


def setup_logging(level: str | None = None, environment: str | None = None) -> None:
    """Configure logging for the host process.

    The evaluation engine itself only emits through module loggers; the
    host calls this once at start-up.

    Args:
        level: Root log level (e.g. "DEBUG", "INFO"). Defaults to
            ``Settings.log_level``.
        environment: "development", "staging" or "production". Defaults to
            ``Settings.app_env``. Development logs human-readable lines,
            everything else one JSON-like object per line.
    """
    if level is None or environment is None:
        from api_inspector.config import get_settings

        settings = get_settings()
        level = level or settings.log_level
        environment = environment or settings.app_env.value

    fmt = _DEV_FORMAT if environment == "development" else _PROD_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.setLevel(level.upper())

    root.handlers.clear()
    root.addHandler(handler)

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
