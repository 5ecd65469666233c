"""Prompt templates used by the evaluation engine."""

from api_inspector.prompts.evaluation import (
    AFFIRMATIVE_TOKEN,
    DESCRIPTIVE_BATCH_PROMPT,
    LAYERED_EXTRACTION_PROMPT,
    NEGATIVE_TOKEN,
)

__all__ = [
    "AFFIRMATIVE_TOKEN",
    "DESCRIPTIVE_BATCH_PROMPT",
    "LAYERED_EXTRACTION_PROMPT",
    "NEGATIVE_TOKEN",
]
