"""Measurable evaluator: deterministic checks, no model call."""

from __future__ import annotations

from typing import Any

from api_inspector.evaluator import EvaluationResult, EvaluationType
from api_inspector.evaluator.criteria.base import Criterion
from api_inspector.evaluator.measures import apply_measure
from api_inspector.evaluator.paths import as_tree, extract_values


def evaluate_measurable(output: Any, criterion: Criterion) -> EvaluationResult:
    """Evaluate one measurable criterion against an output tree.

    A criterion without a measure function or target path fails without
    being measured.

    Args:
        output: The structured output (plain tree or pydantic model).
        criterion: The criterion to check.

    Returns:
        The result, with ``evaluation_time`` left at 0 for the router to stamp.
    """
    if criterion.measure_function is None or not criterion.target_field:
        return EvaluationResult(
            criteria_id=criterion.id,
            passed=False,
            evaluation_type=EvaluationType.MEASURABLE,
        )

    values = extract_values(as_tree(output), criterion.target_field)
    passed, actual_value = apply_measure(criterion.measure_function, values, criterion.ground_truth)

    return EvaluationResult(
        criteria_id=criterion.id,
        passed=passed,
        actual_value=actual_value,
        expected_value=criterion.ground_truth,
        evaluation_type=EvaluationType.MEASURABLE,
    )
