"""Descriptive evaluator: one LLM-as-Judge call for a batch of criteria.

The model answers YES or NO per question, one line each, in question order.
Parsing is fail-closed: a missing line or any answer without ``YES`` counts
as a failed criterion. If the call itself fails the whole batch fails.
"""

from __future__ import annotations

import logging
from typing import Any

from api_inspector.evaluator import EvaluationResult, EvaluationType
from api_inspector.evaluator.criteria.base import Criterion
from api_inspector.evaluator.exceptions import is_fatal_llm_error
from api_inspector.prompts import AFFIRMATIVE_TOKEN, DESCRIPTIVE_BATCH_PROMPT, NEGATIVE_TOKEN
from api_inspector.utils.completion import TextCompleter, serialize_output

logger = logging.getLogger(__name__)


def build_questions_block(criteria: list[Criterion]) -> str:
    """Number the batch's questions as ``N. [id] question``."""
    return "\n".join(f"{i}. [{c.id}] {c.question}" for i, c in enumerate(criteria, start=1))


def parse_batch_answers(response_text: str, count: int) -> list[bool]:
    """Map the i-th non-blank response line to the i-th verdict.

    Args:
        response_text: Raw model answer.
        count: Number of questions asked.

    Returns:
        Exactly ``count`` verdicts; lines beyond the response are ``False``.
    """
    lines = [line for line in response_text.strip().splitlines() if line.strip()]
    verdicts: list[bool] = []
    for i in range(count):
        line = lines[i] if i < len(lines) else ""
        verdicts.append(AFFIRMATIVE_TOKEN in line.upper())
    return verdicts


async def evaluate_descriptive_batch(
    output: Any,
    criteria: list[Criterion],
    completer: TextCompleter,
) -> list[EvaluationResult]:
    """Judge all descriptive criteria with a single completion call.

    Args:
        output: The structured output tree.
        criteria: The batch, in the order answers are expected.
        completer: The text-completion capability.

    Returns:
        One result per criterion, in input order.
    """
    if not criteria:
        return []

    try:
        prompt = DESCRIPTIVE_BATCH_PROMPT.format(
            data=serialize_output(output),
            questions=build_questions_block(criteria),
        )
        response_text = await completer.complete(prompt)
        verdicts = parse_batch_answers(response_text, len(criteria))
    except Exception as exc:
        if is_fatal_llm_error(exc):
            logger.error("Descriptive batch hit a provider error: %s", exc)
        else:
            logger.warning("Descriptive batch of %d criteria failed: %s", len(criteria), exc, exc_info=True)
        return [
            EvaluationResult(
                criteria_id=c.id,
                passed=False,
                evaluation_type=EvaluationType.DESCRIPTIVE,
            )
            for c in criteria
        ]

    return [
        EvaluationResult(
            criteria_id=criterion.id,
            passed=passed,
            actual_value=AFFIRMATIVE_TOKEN if passed else NEGATIVE_TOKEN,
            expected_value=criterion.ground_truth,
            evaluation_type=EvaluationType.DESCRIPTIVE,
        )
        for criterion, passed in zip(criteria, verdicts)
    ]
