"""Criteria registry for generated API descriptions.

Criteria are plain declarations; the router decides how each one is
evaluated from its ``evaluation_type``.
"""

from __future__ import annotations

from api_inspector.evaluator import EvaluationType
from api_inspector.evaluator.criteria.api_analysis import (
    API_CRITERIA,
    API_DESCRIPTIVE_CRITERIA,
    API_MEASURABLE_CRITERIA,
)
from api_inspector.evaluator.criteria.base import Criterion

_CRITERIA_REGISTRY: dict[str, list[Criterion]] = {
    "api_analysis": API_CRITERIA,
}


def get_default_api_criteria() -> list[Criterion]:
    """Return a fresh copy of the built-in API criteria.

    The list is copied so callers may filter or extend it freely; the
    criteria themselves are frozen and shared.
    """
    return list(API_CRITERIA)


def get_criteria_for_output_kind(output_kind: str) -> list[Criterion]:
    """Return the criteria for an output kind, defaulting to API analysis.

    Args:
        output_kind: Registry key, e.g. ``"api_analysis"``.

    Returns:
        A new list of criteria.
    """
    return list(_CRITERIA_REGISTRY.get(output_kind, API_CRITERIA))


def filter_by_type(criteria: list[Criterion], evaluation_type: EvaluationType) -> list[Criterion]:
    """Select the criteria of one strategy, preserving input order."""
    return [c for c in criteria if c.evaluation_type == evaluation_type]


__all__ = [
    "API_CRITERIA",
    "API_DESCRIPTIVE_CRITERIA",
    "API_MEASURABLE_CRITERIA",
    "Criterion",
    "filter_by_type",
    "get_criteria_for_output_kind",
    "get_default_api_criteria",
]
