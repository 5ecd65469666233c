"""Deterministic measure functions for measurable criteria.

Every function takes the values extracted for a criterion plus its ground
truth and returns ``(passed, actual_value)``. ``passed`` holds only if every
value satisfies the predicate; ``actual_value`` is the first value (or its
measurement) and is used for diagnostics only.

Existence checks (``string_not_empty``, ``array_not_empty``,
``field_exists``) fail when nothing matched. The remaining checks pass on an
empty match set: an output without issues has no invalid severity.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any

from api_inspector.evaluator import ActualValue, GroundTruth, MeasureFunction

MeasureOutcome = tuple[bool, ActualValue | None]
Measure = Callable[[list[Any], GroundTruth | None], MeasureOutcome]

VALID_HTTP_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"})
VALID_SEVERITIES = frozenset({"error", "warning", "info"})
MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599

_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")


def _first(values: list[Any]) -> Any:
    return values[0] if values else None


def as_range(ground_truth: GroundTruth | None) -> tuple[float, float] | None:
    """Return ``(min, max)`` if the ground truth is a numeric range."""
    if not isinstance(ground_truth, (list, tuple)) or len(ground_truth) != 2:
        return None
    low, high = ground_truth
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (low, high)):
        return None
    return low, high


def count_words(text: str) -> int:
    return len(text.split())


def count_sentences(text: str) -> int:
    return len([s for s in _SENTENCE_TERMINATORS.split(text) if s.strip()])


def _counted(values: list[Any], ground_truth: GroundTruth | None, counter: Callable[[str], int]) -> MeasureOutcome:
    bounds = as_range(ground_truth)
    counts = [counter(v) if isinstance(v, str) else 0 for v in values]
    actual = counts[0] if counts else 0
    if bounds is None:
        return False, actual
    low, high = bounds
    return all(low <= c <= high for c in counts), actual


def string_not_empty(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    passed = bool(values) and all(isinstance(v, str) and v.strip() for v in values)
    first = _first(values)
    return passed, None if first is None else str(first)


def array_not_empty(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    passed = bool(values) and all(isinstance(v, (list, tuple)) and len(v) > 0 for v in values)
    first = _first(values)
    return passed, len(first) if isinstance(first, (list, tuple)) else 0


def word_count(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    return _counted(values, ground_truth, count_words)


def sentence_count(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    return _counted(values, ground_truth, count_sentences)


def keyword_presence(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    passed = all(isinstance(v, str) and v in VALID_SEVERITIES for v in values)
    first = _first(values)
    return passed, None if first is None else str(first)


def http_method_valid(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    passed = all(isinstance(v, str) and v.upper() in VALID_HTTP_METHODS for v in values)
    first = _first(values)
    return passed, None if first is None else str(first)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def status_code_valid(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    passed = all(_is_number(v) and MIN_STATUS_CODE <= v <= MAX_STATUS_CODE for v in values)
    first = _first(values)
    return passed, first if _is_number(first) else None


def field_exists(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    passed = bool(values) and all(v is not None for v in values)
    return passed, bool(values)


def regex_match(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    """Prefix check: the value must start with the ground-truth string.

    Not a regular expression, despite the name. Criteria written against
    this function rely on the prefix semantics.
    """
    first = _first(values)
    actual = None if first is None else str(first)
    if not isinstance(ground_truth, str):
        return False, actual
    passed = all(isinstance(v, str) and v.startswith(ground_truth) for v in values)
    return passed, actual


def _parses_as_json(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


def json_structure(values: list[Any], ground_truth: GroundTruth | None = None) -> MeasureOutcome:
    passed = all(_parses_as_json(v) for v in values)
    return passed, passed


MEASURE_FUNCTIONS: dict[MeasureFunction, Measure] = {
    MeasureFunction.STRING_NOT_EMPTY: string_not_empty,
    MeasureFunction.ARRAY_NOT_EMPTY: array_not_empty,
    MeasureFunction.WORD_COUNT: word_count,
    MeasureFunction.SENTENCE_COUNT: sentence_count,
    MeasureFunction.KEYWORD_PRESENCE: keyword_presence,
    MeasureFunction.HTTP_METHOD_VALID: http_method_valid,
    MeasureFunction.STATUS_CODE_VALID: status_code_valid,
    MeasureFunction.FIELD_EXISTS: field_exists,
    MeasureFunction.REGEX_MATCH: regex_match,
    MeasureFunction.JSON_STRUCTURE: json_structure,
}


def apply_measure(
    measure_function: MeasureFunction,
    values: list[Any],
    ground_truth: GroundTruth | None,
) -> MeasureOutcome:
    """Run a measure function by its selector."""
    return MEASURE_FUNCTIONS[measure_function](values, ground_truth)
