"""Layered evaluator: LLM extracts a section, code measures it."""

from __future__ import annotations

import logging
from typing import Any

from api_inspector.evaluator import EvaluationResult, EvaluationType, MeasureFunction
from api_inspector.evaluator.criteria.base import Criterion
from api_inspector.evaluator.exceptions import is_fatal_llm_error
from api_inspector.evaluator.measures import as_range, count_words
from api_inspector.prompts import LAYERED_EXTRACTION_PROMPT
from api_inspector.utils.completion import TextCompleter, serialize_output

logger = logging.getLogger(__name__)


def _failed(criterion: Criterion) -> EvaluationResult:
    return EvaluationResult(
        criteria_id=criterion.id,
        passed=False,
        evaluation_type=EvaluationType.LAYERED_MEASURABLE,
    )


def _measure_extracted(criterion: Criterion, text: str) -> tuple[bool, Any]:
    """Measure the extracted text.

    Only ``word_count`` is wired for this tier; every other selector falls
    back to a non-empty check on the text.
    """
    if criterion.measure_function == MeasureFunction.WORD_COUNT:
        words = count_words(text)
        bounds = as_range(criterion.ground_truth)
        if bounds is None:
            return False, words
        low, high = bounds
        return low <= words <= high, words

    return len(text) > 0, text


async def evaluate_layered(output: Any, criterion: Criterion, completer: TextCompleter) -> EvaluationResult:
    """Evaluate one layered criterion with a single completion call.

    Failures of the call or of the measurement mark the criterion failed and
    are logged; they are never raised.

    Args:
        output: The structured output tree.
        criterion: A criterion with an ``extract_prompt``.
        completer: The text-completion capability.

    Returns:
        The result, with ``evaluation_time`` left for the router to stamp.
    """
    if not criterion.extract_prompt:
        return _failed(criterion)

    try:
        prompt = LAYERED_EXTRACTION_PROMPT.format(
            extract_prompt=criterion.extract_prompt,
            data=serialize_output(output),
        )
        extracted = (await completer.complete(prompt)).strip()
        passed, actual_value = _measure_extracted(criterion, extracted)
    except Exception as exc:
        if is_fatal_llm_error(exc):
            logger.error("Layered evaluation for %s hit a provider error: %s", criterion.id, exc)
        else:
            logger.warning("Layered evaluation for %s failed: %s", criterion.id, exc, exc_info=True)
        return _failed(criterion)

    return EvaluationResult(
        criteria_id=criterion.id,
        passed=passed,
        actual_value=actual_value,
        expected_value=criterion.ground_truth,
        evaluation_type=EvaluationType.LAYERED_MEASURABLE,
    )
