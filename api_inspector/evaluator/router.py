"""Evaluation router: dispatch criteria to the three evaluation tiers.

Tiers run in order of cost:

1. **Measurable**: deterministic code, synchronous, effectively free.
2. **Layered measurable**: one completion call per criterion, sequential.
3. **Descriptive**: one completion call for the whole batch.

Results are returned tier-major (measurable, then layered, then descriptive),
not in the input order of the criteria. Without a completer the two
LLM-backed tiers are skipped and produce no results.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any

from api_inspector.evaluator import EvaluationResult, EvaluationType, QuickCheckResult
from api_inspector.evaluator.criteria import filter_by_type, get_default_api_criteria
from api_inspector.evaluator.criteria.base import Criterion
from api_inspector.evaluator.descriptive import evaluate_descriptive_batch
from api_inspector.evaluator.layered import evaluate_layered
from api_inspector.evaluator.measurable import evaluate_measurable
from api_inspector.evaluator.paths import as_tree
from api_inspector.utils.completion import TextCompleter

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return round((perf_counter() - start) * 1000)


def _run_measurable(tree: Any, criteria: list[Criterion]) -> list[EvaluationResult]:
    results: list[EvaluationResult] = []
    for criterion in criteria:
        start = perf_counter()
        result = evaluate_measurable(tree, criterion)
        result.evaluation_time = _elapsed_ms(start)
        results.append(result)
    return results


async def evaluate_all_criteria(
    output: Any,
    criteria: list[Criterion],
    completer: TextCompleter | None = None,
) -> list[EvaluationResult]:
    """Evaluate every criterion with the tier its ``evaluation_type`` selects.

    Args:
        output: The structured output (plain tree or pydantic model).
        criteria: The criteria to evaluate.
        completer: Text-completion capability for the LLM-backed tiers.

    Returns:
        Results ordered measurable, layered, descriptive; each stamped with
        its elapsed time in milliseconds.
    """
    tree = as_tree(output)

    measurable = filter_by_type(criteria, EvaluationType.MEASURABLE)
    layered = filter_by_type(criteria, EvaluationType.LAYERED_MEASURABLE)
    descriptive = filter_by_type(criteria, EvaluationType.DESCRIPTIVE)

    logger.info(
        "Evaluating %d measurable, %d layered, %d descriptive criteria",
        len(measurable),
        len(layered),
        len(descriptive),
    )

    results = _run_measurable(tree, measurable)

    if (layered or descriptive) and completer is None:
        logger.warning(
            "No completer supplied: skipping %d layered and %d descriptive criteria",
            len(layered),
            len(descriptive),
        )

    if layered and completer is not None:
        for criterion in layered:
            start = perf_counter()
            result = await evaluate_layered(tree, criterion, completer)
            result.evaluation_time = _elapsed_ms(start)
            results.append(result)

    if descriptive and completer is not None:
        start = perf_counter()
        batch = await evaluate_descriptive_batch(tree, descriptive, completer)
        per_criterion = round(_elapsed_ms(start) / len(descriptive))
        for result in batch:
            result.evaluation_time = per_criterion
            results.append(result)

    passed = sum(1 for r in results if r.passed)
    logger.info("Criteria results: %d passed, %d failed", passed, len(results) - passed)

    return results


def quick_measurable_check(output: Any, criteria: list[Criterion] | None = None) -> QuickCheckResult:
    """Run only the measurable criteria; never touches the network.

    Args:
        output: The structured output (plain tree or pydantic model).
        criteria: Criteria to pick the measurable ones from; defaults to the
            built-in API criteria.

    Returns:
        Overall verdict, ids of failed criteria and every result.
    """
    source = criteria if criteria is not None else get_default_api_criteria()
    details = _run_measurable(as_tree(output), filter_by_type(source, EvaluationType.MEASURABLE))
    failed_ids = [r.criteria_id for r in details if not r.passed]
    return QuickCheckResult(passed=not failed_ids, failed_ids=failed_ids, details=details)
